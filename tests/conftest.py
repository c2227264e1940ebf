"""Common test fixtures and utilities."""

from typing import Callable, Iterable, Optional
from unittest.mock import MagicMock

import pytest

from src.playlistmigrator.core import YouTubeClient

from .helpers import playlist_item


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock YouTube API client with common methods configured
    """
    mock = MagicMock()

    mock.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [playlist_item("vid1", "Video 1"), playlist_item("vid2", "Video 2")]
    }
    mock.playlistItems.return_value.insert.return_value.execute.return_value = {"id": "added"}

    mock.playlists.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "id": "playlist1",
                "snippet": {
                    "title": "Playlist 1",
                    "description": "Description 1",
                    "thumbnails": {"medium": {"url": "https://i.ytimg.com/p1.jpg"}},
                },
                "contentDetails": {"itemCount": 2},
            }
        ]
    }
    mock.playlists.return_value.insert.return_value.execute.return_value = {"id": "PLnew1"}

    return mock


@pytest.fixture
def client(youtube_client: MagicMock) -> YouTubeClient:
    """Create a YouTubeClient around the mock API client."""
    return YouTubeClient(youtube_client)


@pytest.fixture
def set_source_items(youtube_client: MagicMock) -> Callable[[Iterable[Optional[str]]], None]:
    """Replace the source playlist contents with the given video IDs."""

    def _set(video_ids: Iterable[Optional[str]]) -> None:
        youtube_client.playlistItems.return_value.list.return_value.execute.return_value = {
            "items": [playlist_item(v) for v in video_ids]
        }

    return _set

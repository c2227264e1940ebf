"""Tests for the YouTube API client wrapper."""

import pytest
from unittest.mock import MagicMock

from src.playlistmigrator.core import YouTubeClient
from src.playlistmigrator.errors import (
    AuthorizationError,
    PlaylistNotFoundError,
    UpstreamError,
)

from .helpers import make_http_error, playlist_item


def test_list_playlists(client: YouTubeClient, youtube_client: MagicMock):
    """Test listing the user's playlists."""
    playlists = client.list_playlists()

    assert playlists == [
        {
            "id": "playlist1",
            "title": "Playlist 1",
            "item_count": 2,
            "thumbnail": "https://i.ytimg.com/p1.jpg",
        }
    ]
    youtube_client.playlists.return_value.list.assert_called_once_with(
        part="snippet,contentDetails", mine=True, maxResults=50
    )


def test_list_playlists_without_thumbnail(client: YouTubeClient, youtube_client: MagicMock):
    """Test playlists with no thumbnails or content details."""
    youtube_client.playlists.return_value.list.return_value.execute.return_value = {
        "items": [{"id": "PL1", "snippet": {"title": "Bare"}}]
    }

    assert client.list_playlists() == [
        {"id": "PL1", "title": "Bare", "item_count": 0, "thumbnail": None}
    ]


def test_list_playlists_rejected_credential(client: YouTubeClient, youtube_client: MagicMock):
    """Test that a 401 becomes an AuthorizationError."""
    youtube_client.playlists.return_value.list.return_value.execute.side_effect = (
        make_http_error(401, "Invalid Credentials")
    )

    with pytest.raises(AuthorizationError):
        client.list_playlists()


def test_get_playlist_info(client: YouTubeClient, youtube_client: MagicMock):
    """Test getting playlist information."""
    info = client.get_playlist_info("playlist1")

    assert info == {"id": "playlist1", "title": "Playlist 1", "description": "Description 1"}
    youtube_client.playlists.return_value.list.assert_called_once_with(
        part="snippet", id="playlist1", maxResults=1
    )


def test_get_playlist_info_not_found(client: YouTubeClient, youtube_client: MagicMock):
    """Test getting info for a playlist that does not exist."""
    youtube_client.playlists.return_value.list.return_value.execute.return_value = {"items": []}

    with pytest.raises(PlaylistNotFoundError):
        client.get_playlist_info("nonexistent")


def test_list_playlist_items(client: YouTubeClient, youtube_client: MagicMock):
    """Test getting the videos in a playlist."""
    youtube_client.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [
            playlist_item("vid1", "Song", channel="Artist - Topic"),
            {"id": "orphan"},
            {
                "snippet": {
                    "title": "Uploaded",
                    "channelTitle": "Uploader",
                    "resourceId": {"videoId": "vid2"},
                }
            },
        ]
    }

    videos = client.list_playlist_items("playlist1")

    assert videos == [
        {"video_id": "vid1", "title": "Song", "channel": "Artist - Topic"},
        {"video_id": "vid2", "title": "Uploaded", "channel": "Uploader"},
    ]


def test_list_playlist_items_not_found(client: YouTubeClient, youtube_client: MagicMock):
    """Test getting videos from a playlist that does not exist."""
    youtube_client.playlistItems.return_value.list.return_value.execute.side_effect = (
        make_http_error(404, "The playlist could not be found.", "playlistNotFound")
    )

    with pytest.raises(PlaylistNotFoundError):
        client.list_playlist_items("nonexistent")


def test_list_playlist_items_network_error(client: YouTubeClient, youtube_client: MagicMock):
    """Test that transport failures become UpstreamErrors."""
    youtube_client.playlistItems.return_value.list.return_value.execute.side_effect = (
        TimeoutError("timed out")
    )

    with pytest.raises(UpstreamError, match="timed out"):
        client.list_playlist_items("playlist1")


def test_list_item_references(client: YouTubeClient):
    """Test getting only the video IDs."""
    assert client.list_item_references("playlist1") == ["vid1", "vid2"]


def test_create_playlist(client: YouTubeClient, youtube_client: MagicMock):
    """Test creating a playlist."""
    playlist_id = client.create_playlist("Mix", "Desc")

    assert playlist_id == "PLnew1"
    youtube_client.playlists.return_value.insert.assert_called_once_with(
        part="snippet,status",
        body={
            "snippet": {"title": "Mix", "description": "Desc"},
            "status": {"privacyStatus": "private"},
        },
    )


def test_create_playlist_without_id(client: YouTubeClient, youtube_client: MagicMock):
    """Test a create response that carries no ID."""
    youtube_client.playlists.return_value.insert.return_value.execute.return_value = {}

    with pytest.raises(UpstreamError):
        client.create_playlist("Mix")


def test_create_playlist_with_unusable_id(client: YouTubeClient, youtube_client: MagicMock):
    """Test a create response whose ID cannot be used as a destination."""
    youtube_client.playlists.return_value.insert.return_value.execute.return_value = {
        "id": "PL new.1"
    }

    with pytest.raises(UpstreamError, match="invalid playlist id"):
        client.create_playlist("Mix")


def test_add_item(client: YouTubeClient, youtube_client: MagicMock):
    """Test appending a video to a playlist."""
    client.add_item("PLdest", "vid1")

    youtube_client.playlistItems.return_value.insert.assert_called_once_with(
        part="snippet",
        body={
            "snippet": {
                "playlistId": "PLdest",
                "resourceId": {"kind": "youtube#video", "videoId": "vid1"},
            }
        },
    )


def test_add_item_raises_untranslated_error(client: YouTubeClient, youtube_client: MagicMock):
    """Test that add_item leaves the upstream error intact."""
    error = make_http_error(403, "private video")
    youtube_client.playlistItems.return_value.insert.return_value.execute.side_effect = error

    with pytest.raises(type(error)) as exc_info:
        client.add_item("PLdest", "vid1")

    assert exc_info.value is error

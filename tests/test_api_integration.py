"""Read-only tests against the live YouTube API.

Run with ``pytest --run-api`` and ``YOUTUBE_ACCESS_TOKEN`` set.
"""

import os

import pytest

from src.playlistmigrator.auth import build_youtube_service
from src.playlistmigrator.core import YouTubeClient
from src.playlistmigrator.errors import AuthorizationError
from src.playlistmigrator.pipeline import enumerate_items


@pytest.fixture(scope="module")
def live_client():
    token = os.getenv("YOUTUBE_ACCESS_TOKEN")
    if not token:
        pytest.skip("YOUTUBE_ACCESS_TOKEN not set")
    return YouTubeClient(build_youtube_service(token))


@pytest.mark.api
def test_list_playlists(live_client):
    playlists = live_client.list_playlists()

    assert len(playlists) <= 50
    for playlist in playlists:
        assert playlist["id"]


@pytest.mark.api
def test_enumerate_first_playlist(live_client):
    playlists = live_client.list_playlists()
    if not playlists:
        pytest.skip("Account has no playlists")

    items = enumerate_items(live_client, playlists[0]["id"])

    assert len(items) <= 50
    assert all(items)


@pytest.mark.api
def test_rejected_token():
    client = YouTubeClient(build_youtube_service("not-a-real-token"))

    with pytest.raises(AuthorizationError):
        client.list_playlists()

"""YouTube API client wrapper."""

import logging
from typing import Dict, List

from . import config
from .errors import PlaylistNotFoundError, UpstreamError, translate_http_error
from .utils import is_valid_playlist_id


logger = logging.getLogger(__name__)


class YouTubeClient:
    """Thin wrapper over the YouTube Data API calls used by the migration."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API resource bound to the caller's credential
        """
        self.youtube = youtube

    def _execute(self, request, context: str) -> Dict:
        try:
            response = request.execute()
        except Exception as e:
            raise translate_http_error(e, context) from e
        logger.debug("%s: %s", context, response)
        return response

    def list_playlists(self) -> List[Dict[str, object]]:
        """Get the authenticated user's playlists (first page only).

        Returns:
            List of playlist dictionaries with id, title, item_count and thumbnail

        Raises:
            AuthorizationError: If the credential is rejected
            UpstreamError: If API request fails
        """
        request = self.youtube.playlists().list(
            part="snippet,contentDetails",
            mine=True,
            maxResults=config.PAGE_SIZE,
        )
        response = self._execute(request, "Failed to list playlists")

        playlists = []
        for item in response.get("items", []):
            snippet = item.get("snippet", {})
            thumbnail = snippet.get("thumbnails", {}).get("medium", {}).get("url")
            playlists.append({
                "id": item["id"],
                "title": snippet.get("title", ""),
                "item_count": item.get("contentDetails", {}).get("itemCount", 0),
                "thumbnail": thumbnail,
            })
        return playlists

    def get_playlist_info(self, playlist_id: str) -> Dict[str, str]:
        """Get playlist information.

        Args:
            playlist_id: ID of playlist to get info for

        Returns:
            Dictionary with playlist id, title and description

        Raises:
            PlaylistNotFoundError: If playlist is not found
            UpstreamError: If API request fails
        """
        request = self.youtube.playlists().list(
            part="snippet",
            id=playlist_id,
            maxResults=1,
        )
        response = self._execute(request, "Failed to get playlist info")

        if not response.get("items"):
            raise PlaylistNotFoundError(f"Playlist {playlist_id} not found")

        playlist = response["items"][0]
        return {
            "id": playlist_id,
            "title": playlist["snippet"]["title"],
            "description": playlist["snippet"].get("description", ""),
        }

    def list_playlist_items(self, playlist_id: str) -> List[Dict[str, str]]:
        """Get the videos in a playlist (first page only).

        Args:
            playlist_id: ID of playlist to get videos from

        Returns:
            List of video dictionaries with video_id, title and channel, in
            playlist order

        Raises:
            AuthorizationError: If the credential is rejected
            PlaylistNotFoundError: If playlist is not found
            UpstreamError: If API request fails
        """
        request = self.youtube.playlistItems().list(
            part="snippet",
            playlistId=playlist_id,
            maxResults=config.PAGE_SIZE,
        )
        response = self._execute(request, "Failed to get playlist videos")

        videos = []
        for item in response.get("items", []):
            snippet = item.get("snippet")
            if not snippet:
                continue
            videos.append({
                "video_id": snippet.get("resourceId", {}).get("videoId"),
                "title": snippet.get("title", ""),
                "channel": snippet.get("videoOwnerChannelTitle") or snippet.get("channelTitle", ""),
            })
        return videos

    def list_item_references(self, playlist_id: str) -> List[str]:
        """Get the video IDs in a playlist, skipping entries without one.

        Raises:
            AuthorizationError: If the credential is rejected
            PlaylistNotFoundError: If playlist is not found
            UpstreamError: If API request fails
        """
        return [v["video_id"] for v in self.list_playlist_items(playlist_id) if v["video_id"]]

    def create_playlist(self, title: str, description: str = "") -> str:
        """Create a new playlist.

        Args:
            title: Playlist title
            description: Playlist description

        Returns:
            ID of the created playlist

        Raises:
            AuthorizationError: If the credential is rejected
            UpstreamError: If the request is rejected
        """
        request = self.youtube.playlists().insert(
            part="snippet,status",
            body={
                "snippet": {"title": title, "description": description},
                "status": {"privacyStatus": config.DESTINATION_PRIVACY},
            },
        )
        response = self._execute(request, "Failed to create playlist")
        playlist_id = response.get("id")
        if not playlist_id:
            raise UpstreamError("Failed to create playlist: response did not include an id")
        if not is_valid_playlist_id(playlist_id):
            raise UpstreamError(f"Failed to create playlist: invalid playlist id {playlist_id!r}")
        return playlist_id

    def add_item(self, playlist_id: str, video_id: str) -> None:
        """Append one video to a playlist.

        Errors from the request are not translated so callers can read the
        platform's message from them.

        Args:
            playlist_id: ID of playlist to add to
            video_id: ID of video to add
        """
        request = self.youtube.playlistItems().insert(
            part="snippet",
            body={
                "snippet": {
                    "playlistId": playlist_id,
                    "resourceId": {"kind": "youtube#video", "videoId": video_id},
                }
            },
        )
        request.execute()

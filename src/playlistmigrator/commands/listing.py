"""Commands that list playlists and their videos."""

from ..core import YouTubeClient
from ..logging_config import get_logger
from ..utils import parse_playlist_url, pluralize
from .base import PlaylistCommand

logger = get_logger(__name__)


class ListPlaylistsCommand(PlaylistCommand):
    """Command for listing the user's playlists."""

    def _run(self) -> bool:
        playlists = self.youtube.list_playlists()
        if not playlists:
            logger.info("No playlists found in your account.")
            return True

        for playlist in playlists:
            logger.info(
                "%s  %s (%s)",
                playlist["id"],
                playlist["title"],
                pluralize(playlist["item_count"], "video"),
            )
        return True


class ListItemsCommand(PlaylistCommand):
    """Command for listing the videos in a playlist."""

    def __init__(self, youtube: YouTubeClient, playlist: str) -> None:
        """Initialize command.

        Args:
            youtube: YouTube API client
            playlist: Playlist ID or URL
        """
        super().__init__(youtube)
        self.playlist = playlist
        self.playlist_id = None

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.playlist:
            raise ValueError("Playlist ID is required")
        self.playlist_id = parse_playlist_url(self.playlist)

    def _run(self) -> bool:
        videos = self.youtube.list_playlist_items(self.playlist_id)
        if not videos:
            logger.info("No videos in this playlist")
            return True

        for index, video in enumerate(videos, start=1):
            logger.info("%d. %s - %s", index, video["title"], video["channel"])
        return True

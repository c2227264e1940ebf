"""Migrate command: copy a playlist into a new YouTube Music playlist."""

from typing import Optional

from tqdm import tqdm

from ..core import YouTubeClient
from ..logging_config import get_logger
from ..models import ItemFailure, MigrationResult, PlaylistDescriptor
from ..pipeline import MigrationPipeline
from ..utils import parse_playlist_url
from .base import PlaylistCommand

# Get logger for this module
logger = get_logger(__name__)

DEFAULT_NAME_SUFFIX = " (Music)"


class MigrateCommand(PlaylistCommand):
    """Command for copying a playlist's videos into a newly created playlist."""

    def __init__(
        self,
        youtube: YouTubeClient,
        source_playlist: str,
        name: Optional[str] = None,
        description: str = "",
        verbose: bool = False,
        show_progress: bool = True,
    ) -> None:
        """Initialize command.

        Args:
            youtube: YouTube API client
            source_playlist: Source playlist ID or URL
            name: Name of the playlist to create; defaults to the source
                playlist's title followed by " (Music)"
            description: Description of the playlist to create
            verbose: Whether to list every failed video
            show_progress: Whether to show a progress bar while adding videos
        """
        super().__init__(youtube)
        self.source_playlist = source_playlist
        self.name = name
        self.description = description
        self.verbose = verbose
        self.show_progress = show_progress
        self.source_playlist_id: Optional[str] = None
        self.result: Optional[MigrationResult] = None

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.source_playlist:
            raise ValueError("Source playlist ID is required")
        self.source_playlist_id = parse_playlist_url(self.source_playlist)
        if self.name is not None and not self.name.strip():
            raise ValueError("Playlist name cannot be blank")

    def _descriptor(self) -> PlaylistDescriptor:
        name = self.name
        if name is None:
            info = self.youtube.get_playlist_info(self.source_playlist_id)
            name = f"{info['title']}{DEFAULT_NAME_SUFFIX}"
        return PlaylistDescriptor(name=name, description=self.description)

    def _run(self) -> bool:
        """Run the migration.

        Returns:
            bool: True if the migration completed, False if it failed
        """
        descriptor = self._descriptor()

        with tqdm(desc="Adding videos", unit="video", disable=not self.show_progress) as bar:

            def progress(item_reference: str, failure: Optional[ItemFailure]) -> None:
                if bar.total is None:
                    bar.total = len(pipeline.items)
                bar.update(1)

            pipeline = MigrationPipeline(self.youtube, progress=progress)
            self.result = pipeline.run(self.source_playlist_id, descriptor)

        if not self.result.succeeded:
            logger.error("Migration failed: %s", self.result.reason)
            return False

        summary = self.result.summary
        logger.info(summary.message)
        logger.info("Open in YouTube Music: %s", summary.playlist_url)
        if summary.warning:
            logger.warning(summary.warning)
            if self.verbose:
                for failure in summary.failed:
                    logger.warning("- %s: %s", failure.item_reference, failure.error_reason)
        return True

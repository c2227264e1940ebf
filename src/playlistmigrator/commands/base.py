"""Base command class for playlist operations."""

from ..core import YouTubeClient
from ..errors import PlaylistMigrationError
from ..logging_config import get_logger

# Get logger for this module
logger = get_logger(__name__)


class PlaylistCommand:
    """Base class for playlist commands."""

    def __init__(self, youtube: YouTubeClient):
        """Initialize command.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube
        self._logger = logger
        self._validated = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.youtube:
            raise ValueError("YouTube API client is required")
        self._validated = True

    def run(self) -> bool:
        """Run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            PlaylistMigrationError: If command fails
        """
        try:
            self.validate()
            return self._run()
        except PlaylistMigrationError:
            raise
        except Exception as e:
            raise PlaylistMigrationError(str(e)) from e

    def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False

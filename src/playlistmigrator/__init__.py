"""Copy YouTube playlists into YouTube Music playlists."""

__version__ = "0.1.0"

from .core import YouTubeClient
from .errors import (
    AuthorizationError,
    EmptySourceError,
    InvalidDestinationError,
    PlaylistMigrationError,
    PlaylistNotFoundError,
    UpstreamError,
)
from .logging_config import get_logger
from .models import (
    CreatedPlaylist,
    ItemFailure,
    MigrationResult,
    MigrationSummary,
    PipelineState,
    PlaylistDescriptor,
    PopulationOutcome,
)
from .pipeline import (
    MigrationPipeline,
    create_destination,
    enumerate_items,
    migrate_playlist,
    populate,
    summarize,
)

# Get logger for this module
logger = get_logger(__name__)

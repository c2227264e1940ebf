"""Playlist migration pipeline.

A migration runs four steps in order: enumerate the source playlist's
videos, create the destination playlist, add the videos to it one at a time,
and summarize the result. Enumeration and creation failures are fatal;
individual add failures are recorded and the batch carries on.
"""

from typing import Callable, List, Optional, Sequence

from . import config
from .core import YouTubeClient
from .errors import (
    EmptySourceError,
    InvalidDestinationError,
    PlaylistMigrationError,
    upstream_message,
)
from .logging_config import get_logger
from .models import (
    CreatedPlaylist,
    ItemFailure,
    MigrationResult,
    MigrationSummary,
    OutcomeBuilder,
    PipelineState,
    PlaylistDescriptor,
    PopulationOutcome,
)
from .utils import is_valid_playlist_id, pluralize

logger = get_logger(__name__)

ProgressCallback = Callable[[str, Optional[ItemFailure]], None]


def enumerate_items(client: YouTubeClient, source_playlist_id: str) -> List[str]:
    """List the video IDs of a source playlist, in playlist order.

    Only the first page of results is read. An empty playlist yields an
    empty list.

    Raises:
        AuthorizationError: If the credential is rejected
        PlaylistNotFoundError: If the playlist does not exist or is inaccessible
        UpstreamError: If the request fails for any other reason
    """
    logger.info("Enumerating videos in playlist %s", source_playlist_id)
    items = client.list_item_references(source_playlist_id)
    logger.info("Found %s", pluralize(len(items), "video"))
    return items


def create_destination(client: YouTubeClient, descriptor: PlaylistDescriptor) -> CreatedPlaylist:
    """Create a new, empty destination playlist.

    Every call creates a new playlist; there is no de-duplication.

    Raises:
        AuthorizationError: If the credential is rejected
        UpstreamError: If the create request is rejected
    """
    logger.info('Creating playlist "%s"', descriptor.name)
    playlist_id = client.create_playlist(descriptor.name, descriptor.description)
    created = CreatedPlaylist.from_id(playlist_id)
    logger.info("Created playlist %s", created.id)
    return created


def add_one(client: YouTubeClient, playlist_id: str, item_reference: str) -> Optional[ItemFailure]:
    """Add a single video, returning the failure instead of raising it."""
    try:
        client.add_item(playlist_id, item_reference)
    except Exception as e:
        reason = upstream_message(e) or config.UNKNOWN_ERROR_REASON
        logger.error("Failed to add video %s: %s", item_reference, reason)
        logger.debug("Add failure detail for %s: %r", item_reference, e)
        return ItemFailure(item_reference=item_reference, error_reason=reason)
    return None


def populate(
    client: YouTubeClient,
    playlist_id: str,
    item_references: Sequence[str],
    progress: Optional[ProgressCallback] = None,
) -> PopulationOutcome:
    """Add each video to the destination playlist, in order, one at a time.

    A failed item is recorded and processing continues with the next one.

    Args:
        client: YouTube API client
        playlist_id: ID of the destination playlist
        item_references: Video IDs to add
        progress: Optional callable invoked after each item with the video ID
            and its failure (None on success)

    Returns:
        PopulationOutcome with the added count and the failures in input order

    Raises:
        InvalidDestinationError: If the destination ID is unusable; raised
            before any item is attempted
    """
    if not is_valid_playlist_id(playlist_id):
        raise InvalidDestinationError(f"Invalid destination playlist ID: {playlist_id!r}")

    logger.info("Adding %s to playlist %s", pluralize(len(item_references), "video"), playlist_id)
    builder = OutcomeBuilder()
    for item_reference in item_references:
        failure = add_one(client, playlist_id, item_reference)
        if failure:
            builder.record_failure(failure)
        else:
            builder.record_success()
        if progress:
            progress(item_reference, failure)

    outcome = builder.build()
    logger.info(
        "Added %d of %d, failed %d", outcome.added, outcome.total, len(outcome.failed)
    )
    return outcome


def summarize(
    outcome: PopulationOutcome, created: Optional[CreatedPlaylist] = None
) -> MigrationSummary:
    """Build the user-facing summary of a population outcome."""
    message = f"Successfully created playlist with {pluralize(outcome.added, 'video')}!"
    warning = None
    if outcome.failed:
        warning = (
            f"{pluralize(len(outcome.failed), 'video')} could not be added "
            "(may be deleted or private)"
        )
    return MigrationSummary(
        added_count=outcome.added,
        failed_count=len(outcome.failed),
        failed=outcome.failed,
        message=message,
        warning=warning,
        playlist_url=created.url if created else None,
    )


class MigrationPipeline:
    """Runs one migration from a source playlist into a new playlist.

    A pipeline instance holds the state of a single run; create a new one
    per migration.
    """

    def __init__(self, client: YouTubeClient, progress: Optional[ProgressCallback] = None):
        """Initialize pipeline.

        Args:
            client: YouTube API client bound to the caller's credential
            progress: Optional per-item progress callback passed to populate
        """
        self.client = client
        self.progress = progress
        self.state = PipelineState.IDLE
        self.history: List[PipelineState] = [PipelineState.IDLE]
        self.items: List[str] = []

    def _transition(self, state: PipelineState) -> None:
        logger.debug("Pipeline state %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _fail(self, error: Exception) -> MigrationResult:
        logger.error("Migration failed while %s: %s", self.state.value, str(error))
        self._transition(PipelineState.FAILED)
        return MigrationResult(state=PipelineState.FAILED, reason=str(error), error=error)

    def run(self, source_playlist_id: str, descriptor: PlaylistDescriptor) -> MigrationResult:
        """Run the migration.

        Args:
            source_playlist_id: ID of the playlist to copy
            descriptor: Name and description of the playlist to create

        Returns:
            MigrationResult in state DONE with a summary, or FAILED with the
            reason when enumeration or creation fails
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError("A migration pipeline can only be run once")

        self._transition(PipelineState.ENUMERATING)
        try:
            self.items = enumerate_items(self.client, source_playlist_id)
            if not self.items:
                raise EmptySourceError(source_playlist_id)
        except PlaylistMigrationError as e:
            return self._fail(e)

        self._transition(PipelineState.CREATING)
        try:
            created = create_destination(self.client, descriptor)
        except PlaylistMigrationError as e:
            return self._fail(e)

        self._transition(PipelineState.POPULATING)
        outcome = populate(self.client, created.id, self.items, progress=self.progress)
        summary = summarize(outcome, created)

        self._transition(PipelineState.DONE)
        return MigrationResult(
            state=PipelineState.DONE,
            created=created,
            outcome=outcome,
            summary=summary,
        )


def migrate_playlist(
    client: YouTubeClient,
    source_playlist_id: str,
    descriptor: PlaylistDescriptor,
    progress: Optional[ProgressCallback] = None,
) -> MigrationResult:
    """Run a migration with a fresh pipeline."""
    return MigrationPipeline(client, progress=progress).run(source_playlist_id, descriptor)

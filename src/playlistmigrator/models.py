"""Data types passed between the migration steps."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from . import config


@dataclass(frozen=True)
class PlaylistDescriptor:
    """Name and description for a playlist that is about to be created."""

    name: str
    description: str = ""

    def __post_init__(self):
        name = (self.name or "").strip()
        if not name:
            raise ValueError("Playlist name is required")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "description", (self.description or "").strip())


@dataclass(frozen=True)
class CreatedPlaylist:
    """A playlist created on the destination platform."""

    id: str
    url: str

    @classmethod
    def from_id(cls, playlist_id: str) -> "CreatedPlaylist":
        return cls(id=playlist_id, url=config.MUSIC_PLAYLIST_URL.format(playlist_id=playlist_id))


@dataclass(frozen=True)
class ItemFailure:
    """An item that could not be added, with the reason reported upstream."""

    item_reference: str
    error_reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"videoId": self.item_reference, "error": self.error_reason}


@dataclass(frozen=True)
class PopulationOutcome:
    """Result of adding a batch of items to a playlist.

    ``added + len(failed)`` always equals the number of items submitted, and
    ``failed`` keeps the submission order.
    """

    added: int = 0
    failed: Tuple[ItemFailure, ...] = ()

    @property
    def total(self) -> int:
        return self.added + len(self.failed)

    def to_dict(self) -> Dict[str, object]:
        return {"added": self.added, "failed": [f.to_dict() for f in self.failed]}


@dataclass
class OutcomeBuilder:
    """Accumulates per-item results while a batch is being processed."""

    added: int = 0
    failed: List[ItemFailure] = field(default_factory=list)

    def record_success(self) -> None:
        self.added += 1

    def record_failure(self, failure: ItemFailure) -> None:
        self.failed.append(failure)

    def build(self) -> PopulationOutcome:
        return PopulationOutcome(added=self.added, failed=tuple(self.failed))


@dataclass(frozen=True)
class MigrationSummary:
    """User-facing summary of a completed migration."""

    added_count: int
    failed_count: int
    failed: Tuple[ItemFailure, ...]
    message: str
    warning: Optional[str] = None
    playlist_url: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "added": self.added_count,
            "failedCount": self.failed_count,
            "failed": [f.to_dict() for f in self.failed],
            "message": self.message,
            "warning": self.warning,
            "url": self.playlist_url,
        }


class PipelineState(Enum):
    """States of a single migration run."""

    IDLE = "idle"
    ENUMERATING = "enumerating"
    CREATING = "creating"
    POPULATING = "populating"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class MigrationResult:
    """Terminal result of a migration run: Done with a summary, or Failed with a reason."""

    state: PipelineState
    created: Optional[CreatedPlaylist] = None
    outcome: Optional[PopulationOutcome] = None
    summary: Optional[MigrationSummary] = None
    reason: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE

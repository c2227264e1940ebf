"""Command module initialization."""

from .base import PlaylistCommand
from .listing import ListItemsCommand, ListPlaylistsCommand  # noqa: F401
from .migrate import MigrateCommand  # noqa: F401

__all__ = ["PlaylistCommand", "ListItemsCommand", "ListPlaylistsCommand", "MigrateCommand"]

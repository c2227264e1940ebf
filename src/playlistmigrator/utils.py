"""Utility functions for playlist operations."""

import re

PLAYLIST_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def is_valid_playlist_id(playlist_id: str) -> bool:
    """Check that a string looks like a playlist ID."""
    return bool(playlist_id) and bool(PLAYLIST_ID_PATTERN.match(playlist_id))


def parse_playlist_url(playlist_str: str) -> str:
    """Extract playlist ID from a YouTube playlist URL or return the raw ID.

    Args:
        playlist_str: A YouTube or YouTube Music playlist URL or ID

    Returns:
        The playlist ID

    Raises:
        ValueError if the input is not a valid playlist URL or ID
    """
    url_match = re.search(r"[?&]list=([^&#]+)", playlist_str)
    if url_match:
        return url_match.group(1)

    if is_valid_playlist_id(playlist_str):
        return playlist_str

    raise ValueError(
        f"Invalid playlist format: {playlist_str}. Must be a YouTube playlist URL or ID"
    )


def pluralize(count: int, noun: str) -> str:
    """Format a count with a noun, adding an "s" unless the count is one."""
    return f"{count} {noun}{'' if count == 1 else 's'}"

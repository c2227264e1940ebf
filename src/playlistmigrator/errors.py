"""Error types and upstream error translation."""

import json
from typing import Optional

from googleapiclient.errors import HttpError


class PlaylistMigrationError(Exception):
    """Base class for playlist migration errors."""

    pass


class UpstreamError(PlaylistMigrationError):
    """Error raised when the upstream platform rejects a request."""

    def __init__(self, message: str, status: Optional[int] = None):
        """Initialize error.

        Args:
            message: Human readable reason
            status: HTTP status returned by the platform, if any
        """
        super().__init__(message)
        self.status = status


class AuthorizationError(UpstreamError):
    """Error raised when the authorization credential is missing or rejected."""

    pass


class PlaylistNotFoundError(UpstreamError):
    """Error raised when a playlist does not exist or is inaccessible."""

    pass


class InvalidDestinationError(UpstreamError):
    """Error raised when a batch cannot start because the destination is unusable."""

    pass


class EmptySourceError(PlaylistMigrationError):
    """Error raised when a source playlist has no items to migrate."""

    def __init__(self, playlist_id: Optional[str] = None):
        self.playlist_id = playlist_id
        super().__init__("No videos found in this playlist")


def upstream_message(error: Exception) -> Optional[str]:
    """Extract the platform-provided message from an HttpError body.

    Args:
        error: Exception raised by an API request

    Returns:
        The ``error.message`` field of the response body, or None
    """
    if not isinstance(error, HttpError):
        return None
    try:
        content = error.content.decode("utf-8") if error.content else ""
        data = json.loads(content)
        message = data["error"]["message"]
    except (ValueError, KeyError, TypeError, AttributeError):
        return None
    return message or None


def _upstream_reasons(error: HttpError) -> list:
    try:
        data = json.loads(error.content.decode("utf-8"))
        return [e.get("reason", "") for e in data["error"].get("errors", [])]
    except (ValueError, KeyError, TypeError, AttributeError):
        return []


def translate_http_error(error: Exception, context: str) -> UpstreamError:
    """Convert an exception raised by an API request into an UpstreamError.

    Args:
        error: Exception raised by the request
        context: Short description of the failed operation

    Returns:
        AuthorizationError for rejected credentials, PlaylistNotFoundError for
        missing playlists, UpstreamError otherwise
    """
    if isinstance(error, UpstreamError):
        return error

    if not isinstance(error, HttpError):
        if "playlistNotFound" in str(error):
            return PlaylistNotFoundError(f"{context}: playlist not found")
        return UpstreamError(f"{context}: {str(error)}")

    status = error.resp.status
    message = upstream_message(error) or str(error)
    reasons = _upstream_reasons(error)

    if status == 401 or "authError" in reasons:
        return AuthorizationError(f"{context}: {message}", status=status)
    if status == 404 or "playlistNotFound" in reasons:
        return PlaylistNotFoundError(f"{context}: {message}", status=status)
    return UpstreamError(f"{context}: {message}", status=status)

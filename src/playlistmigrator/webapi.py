"""Web API for the playlist migrator."""

import logging
from typing import Any, List, NoReturn, Optional
from urllib.parse import quote

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, ConfigDict, Field

from . import auth, config
from .core import YouTubeClient
from .errors import (
    AuthorizationError,
    EmptySourceError,
    InvalidDestinationError,
    PlaylistMigrationError,
    PlaylistNotFoundError,
    UpstreamError,
)
from .models import PlaylistDescriptor
from .pipeline import create_destination, migrate_playlist, populate

logger = logging.getLogger(__name__)

app = FastAPI(title="Playlist Migrator")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400, like missing fields."""
    logger.debug("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid or missing request fields"})


class CreatePlaylistRequest(BaseModel):
    """Request model for creating a destination playlist."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: Optional[str] = Field(None, alias="accessToken")
    name: Optional[str] = None
    description: Optional[str] = ""


class AddToPlaylistRequest(BaseModel):
    """Request model for adding videos to a playlist."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: Optional[Any] = Field(None, alias="accessToken")
    playlist_id: Optional[Any] = Field(None, alias="playlistId")
    video_ids: Optional[Any] = Field(None, alias="videoIds")


class MigrateRequest(BaseModel):
    """Request model for running a whole migration."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: Optional[str] = Field(None, alias="accessToken")
    source_playlist_id: Optional[str] = Field(None, alias="sourcePlaylistId")
    name: Optional[str] = None
    description: Optional[str] = ""


def get_youtube_client(access_token: Optional[str]) -> YouTubeClient:
    """Get a YouTube client bound to the caller's access token.

    Raises:
        HTTPException: If the token is missing or the service cannot be built
    """
    try:
        return YouTubeClient(auth.build_youtube_service(access_token))
    except AuthorizationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        logger.error("Failed to build YouTube service: %s", str(e))
        raise HTTPException(status_code=500, detail="Failed to authenticate")


def raise_for_error(error: PlaylistMigrationError) -> NoReturn:
    """Translate a fatal migration error into an HTTP error response."""
    if isinstance(error, AuthorizationError):
        status_code = 401
    elif isinstance(error, PlaylistNotFoundError):
        status_code = 404
    elif isinstance(error, InvalidDestinationError):
        status_code = 400
    elif isinstance(error, EmptySourceError):
        status_code = 422
    elif isinstance(error, UpstreamError):
        status_code = 502
    else:
        status_code = 500
    raise HTTPException(status_code=status_code, detail=str(error))


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


@app.get("/login")
def login() -> RedirectResponse:
    """Redirect the user to the Google consent page."""
    try:
        return RedirectResponse(auth.get_authorization_url())
    except AuthorizationError as e:
        logger.error("Cannot start login: %s", str(e))
        raise HTTPException(status_code=500, detail="OAuth client is not configured")


@app.get("/callback")
def callback(code: Optional[str] = None) -> RedirectResponse:
    """Exchange the authorization code and hand the token back to the page.

    The page itself is served by the UI host at ``config.FRONTEND_URL``; this
    app serves no ``/`` route.
    """
    if not code:
        return RedirectResponse(f"{config.FRONTEND_URL}?error=no_code")

    try:
        token = auth.exchange_code(code)
    except AuthorizationError as e:
        logger.error("Error exchanging code for token: %s", str(e))
        return RedirectResponse(f"{config.FRONTEND_URL}?error=auth_failed")

    return RedirectResponse(f"{config.FRONTEND_URL}?access_token={quote(token)}")


@app.get("/api/playlists")
def list_playlists_endpoint(authorization: Optional[str] = Header(None)) -> List[dict]:
    """List the caller's playlists (first page)."""
    youtube = get_youtube_client(bearer_token(authorization))
    try:
        playlists = youtube.list_playlists()
    except PlaylistMigrationError as e:
        raise_for_error(e)

    return [
        {
            "id": p["id"],
            "title": p["title"],
            "itemCount": p["item_count"],
            "thumbnail": p["thumbnail"],
        }
        for p in playlists
    ]


@app.get("/api/playlists/{playlist_id}/items")
def list_playlist_items_endpoint(
    playlist_id: str, authorization: Optional[str] = Header(None)
) -> List[dict]:
    """List the videos in a playlist (first page)."""
    youtube = get_youtube_client(bearer_token(authorization))
    try:
        videos = youtube.list_playlist_items(playlist_id)
    except PlaylistMigrationError as e:
        raise_for_error(e)

    return [
        {"videoId": v["video_id"], "title": v["title"], "channel": v["channel"]}
        for v in videos
    ]


@app.post("/api/create-playlist")
def create_playlist_endpoint(request: CreatePlaylistRequest) -> dict:
    """Create a new destination playlist.

    Args:
        request: Access token, name and optional description

    Returns:
        The new playlist's ID and YouTube Music URL
    """
    if not request.access_token or not request.name or not request.name.strip():
        raise HTTPException(
            status_code=400, detail="Missing required fields: accessToken and name"
        )

    youtube = get_youtube_client(request.access_token)
    descriptor = PlaylistDescriptor(name=request.name, description=request.description or "")
    try:
        created = create_destination(youtube, descriptor)
    except PlaylistMigrationError as e:
        logger.error("Error creating playlist: %s", str(e))
        raise_for_error(e)

    return {"playlistId": created.id, "url": created.url}


@app.post("/api/add-to-playlist")
def add_to_playlist_endpoint(request: AddToPlaylistRequest) -> dict:
    """Add videos to a playlist one at a time.

    Individual failures are reported in the response body and never fail
    the request.
    """
    if (
        not isinstance(request.access_token, str)
        or not request.access_token
        or not isinstance(request.playlist_id, str)
        or not request.playlist_id
        or not isinstance(request.video_ids, list)
        or not all(isinstance(v, str) for v in request.video_ids)
    ):
        raise HTTPException(
            status_code=400,
            detail="Missing required fields: accessToken, playlistId, and videoIds array",
        )

    youtube = get_youtube_client(request.access_token)
    try:
        outcome = populate(youtube, request.playlist_id, request.video_ids)
    except PlaylistMigrationError as e:
        raise_for_error(e)

    return outcome.to_dict()


@app.post("/api/migrate")
def migrate_endpoint(request: MigrateRequest) -> dict:
    """Run a whole migration: enumerate, create, populate, summarize."""
    name = (request.name or "").strip()
    if not request.access_token or not request.source_playlist_id or not name:
        raise HTTPException(
            status_code=400,
            detail="Missing required fields: accessToken, sourcePlaylistId and name",
        )

    youtube = get_youtube_client(request.access_token)
    descriptor = PlaylistDescriptor(name=request.name, description=request.description or "")
    result = migrate_playlist(youtube, request.source_playlist_id, descriptor)

    if not result.succeeded:
        raise_for_error(result.error)

    body = result.summary.to_dict()
    body["playlistId"] = result.created.id
    return body

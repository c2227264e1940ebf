"""YouTube API authentication handling.

The access token is always supplied by the caller; nothing here caches or
refreshes credentials.
"""

from typing import Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from . import config
from .errors import AuthorizationError
from .logging_config import get_logger

logger = get_logger(__name__)


def build_youtube_service(access_token: Optional[str]):
    """Build a YouTube service bound to one access token.

    Args:
        access_token: OAuth access token supplied by the caller

    Returns:
        YouTube API resource

    Raises:
        AuthorizationError: If no access token was given
    """
    if not access_token:
        raise AuthorizationError("Missing access token")

    creds = Credentials(token=access_token)
    return build("youtube", "v3", credentials=creds, cache_discovery=False)


def _client_config() -> dict:
    if not config.GOOGLE_CLIENT_ID or not config.GOOGLE_CLIENT_SECRET:
        raise AuthorizationError("GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET must be set")
    return {
        "web": {
            "client_id": config.GOOGLE_CLIENT_ID,
            "client_secret": config.GOOGLE_CLIENT_SECRET,
            "auth_uri": config.GOOGLE_AUTH_URI,
            "token_uri": config.GOOGLE_TOKEN_URI,
            "redirect_uris": [config.REDIRECT_URI],
        }
    }


def create_flow() -> Flow:
    """Create an OAuth web flow for the configured client."""
    return Flow.from_client_config(
        _client_config(),
        scopes=config.YOUTUBE_SCOPES,
        redirect_uri=config.REDIRECT_URI,
        autogenerate_code_verifier=False,
    )


def get_authorization_url() -> str:
    """Get the Google consent page URL.

    Returns:
        URL the user should be redirected to

    Raises:
        AuthorizationError: If the OAuth client is not configured
    """
    url, _ = create_flow().authorization_url(access_type="offline", prompt="consent")
    return url


def exchange_code(code: str) -> str:
    """Exchange an authorization code for an access token.

    Args:
        code: Authorization code from the OAuth callback

    Returns:
        Access token

    Raises:
        AuthorizationError: If the exchange fails
    """
    flow = create_flow()
    try:
        flow.fetch_token(code=code)
    except Exception as e:
        raise AuthorizationError(f"Failed to exchange authorization code: {str(e)}") from e

    token = flow.credentials.token
    if not token:
        raise AuthorizationError("Token response did not contain an access token")
    return token

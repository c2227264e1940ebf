"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()

# Server Settings
PORT = int(os.getenv("PORT", "3000"))
REDIRECT_URI = os.getenv("REDIRECT_URI", f"http://localhost:{PORT}/callback")

# Google OAuth Settings
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube"]
GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

# YouTube API Settings
PAGE_SIZE = 50  # Single page; pagination is not followed
DESTINATION_PRIVACY = os.getenv("DESTINATION_PRIVACY", "private")
MUSIC_PLAYLIST_URL = "https://music.youtube.com/playlist?list={playlist_id}"
UNKNOWN_ERROR_REASON = "Unknown error"

# Credential used by the CLI when --access-token is not given
ACCESS_TOKEN_ENV = "YOUTUBE_ACCESS_TOKEN"

# Page the OAuth callback redirects back to; served by the UI host, not this app
FRONTEND_URL = os.getenv("FRONTEND_URL", "/")

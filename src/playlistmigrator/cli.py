"""Command-line interface for playlist migration."""

import argparse
import logging
import os
import sys

from . import auth, commands, config
from .core import YouTubeClient
from .errors import PlaylistMigrationError
from .logging_config import enable_debug


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Copy YouTube playlists into YouTube Music playlists"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--access-token",
        help=f"OAuth access token (defaults to ${config.ACCESS_TOKEN_ENV})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("playlists", help="List your playlists")

    items_parser = subparsers.add_parser("items", help="List the videos in a playlist")
    items_parser.add_argument("playlist", help="Playlist ID or URL")

    migrate_parser = subparsers.add_parser(
        "migrate", help="Copy a playlist into a new YouTube Music playlist"
    )
    migrate_parser.add_argument("source", help="Source playlist ID or URL")
    migrate_parser.add_argument(
        "-n", "--name", help='Name of the new playlist (default: "<source title> (Music)")'
    )
    migrate_parser.add_argument(
        "-d", "--description", default="", help="Description of the new playlist"
    )
    migrate_parser.add_argument(
        "-v", "--verbose", action="store_true", help="List every video that failed"
    )
    migrate_parser.add_argument(
        "--no-progress", action="store_true", help="Do not show a progress bar"
    )

    serve_parser = subparsers.add_parser("serve", help="Run the web API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=config.PORT, help="Port to bind")

    return parser


def serve(host: str, port: int) -> int:
    """Run the web API with uvicorn."""
    import uvicorn

    from .webapi import app

    logger.info("Playlist migrator running on http://%s:%d", host, port)
    logger.info("Make sure to set your Google OAuth Redirect URI to: %s", config.REDIRECT_URI)
    uvicorn.run(app, host=host, port=port)
    return 0


def build_command(args: argparse.Namespace, youtube: YouTubeClient) -> commands.PlaylistCommand:
    """Create the command object for the parsed arguments."""
    if args.command == "playlists":
        return commands.ListPlaylistsCommand(youtube)
    if args.command == "items":
        return commands.ListItemsCommand(youtube, args.playlist)
    return commands.MigrateCommand(
        youtube=youtube,
        source_playlist=args.source,
        name=args.name,
        description=args.description,
        verbose=args.verbose,
        show_progress=not args.no_progress,
    )


def main(argv=None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    argv = sys.argv[1:] if argv is None else argv
    parser = create_parser()
    try:
        args = parser.parse_args(args=argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    if args.debug:
        enable_debug()

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "serve":
        return serve(args.host, args.port)

    access_token = args.access_token or os.getenv(config.ACCESS_TOKEN_ENV)
    try:
        youtube = YouTubeClient(auth.build_youtube_service(access_token))
    except PlaylistMigrationError as e:
        logger.error("Command failed: %s", str(e))
        return 1

    command = build_command(args, youtube)
    try:
        return 0 if command.run() else 1
    except PlaylistMigrationError as e:
        logger.error("Command failed: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Logging configuration for the playlistmigrator package."""

import logging
import sys
from typing import Optional

# Package logger; resolves to "playlistmigrator" (or "src.playlistmigrator" in a checkout)
PACKAGE_LOGGER_NAME = __name__.rsplit(".", 1)[0]

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER_NAME)
logger.setLevel(logging.INFO)

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

logger.addHandler(console_handler)

# Prevent propagation to root logger
logger.propagate = False


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Sets both the logger and console handler back to INFO level.
    """
    logger.setLevel(logging.INFO)
    for handler in logger.handlers:
        handler.setLevel(logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__. If None, returns the
            package logger.

    Returns:
        A Logger that sits under the package logger.
    """
    if not name:
        return logger
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logger.getChild(name)

"""
Centralized logging configuration for phytoshop.

Usage:
    from phytoshop.log import get_logger
    logger = get_logger(__name__)

    logger.info("Operation completed")

Nothing is printed until ``configure_logging()`` is called, which the CLI
does on startup. Library users keep full control of the root logger.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "PHYTOSHOP_LOG_LEVEL"


def _get_log_level(level: str | None = None) -> int:
    """Resolve a level name from the argument, the environment, or WARNING."""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging(level: str | None = None) -> None:
    """Install a stderr handler on the root logger.

    The handler is added once; later calls only adjust the level.
    """
    root = logging.getLogger()
    resolved = _get_log_level(level)
    root.setLevel(resolved)

    if any(getattr(h, "_phytoshop", False) for h in root.handlers):
        return

    # stderr keeps command output on stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._phytoshop = True  # type: ignore[attr-defined]
    root.addHandler(handler)


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "get_logger",
]

"""Logging configuration shared by all tools."""

import logging
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure logging with a rich console handler.

    The handler is attached to the root logger so that every module logger
    obtained through get_logger() shares it.

    Args:
        name: Logger name to return (root logger if None)
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        Configured logger
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)

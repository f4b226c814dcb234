"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
"""

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def _apply_level(level: str) -> None:
    """Set the root level by name; unknown names fall back to INFO with a warning."""
    resolved = logging.getLevelName(level.strip().upper())
    root = logging.getLogger()
    if isinstance(resolved, int):
        root.setLevel(resolved)
        return
    root.setLevel(logging.INFO)
    logging.getLogger(__name__).warning(f"Unknown LOG_LEVEL {level!r}, using INFO.")


def _init_logging() -> None:
    """Attach one stdout handler to the root logger, at LOG_LEVEL (default INFO)."""
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    logging.getLogger().addHandler(_handler)
    _apply_level(os.getenv("LOG_LEVEL", "INFO"))


def set_level(level: str) -> None:
    """Change the root log level after startup, e.g. once .env has been loaded."""
    _init_logging()
    _apply_level(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _init_logging()
    return logging.getLogger(name)

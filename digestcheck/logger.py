"""
Logging helpers for digestcheck.

Modules obtain a named logger with get_logger(__name__); the CLI installs a
single stderr handler on the package root via configure_logging().
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "digestcheck"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_HANDLER_ATTR = "_digestcheck_handler"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr currently is."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger inside the digestcheck hierarchy.

    Args:
        name: Logger name, typically __name__.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package root logger.

    Safe to call repeatedly: the stderr handler is installed once and only
    the level is updated afterwards.

    Args:
        level: Level name, one of LOG_LEVELS.

    Returns:
        The configured root package logger.
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}. Supported: {LOG_LEVELS}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level_name)

    if not any(getattr(h, _HANDLER_ATTR, False) for h in root.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
        root.propagate = False

    return root

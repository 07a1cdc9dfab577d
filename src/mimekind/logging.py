"""Logging utilities for mimekind."""

import logging
import sys
from typing import Any


class Logger:
    """
    Thin wrapper around Python's logging module.

    The library only emits debug records; handlers and levels are left to the
    application (see configure_logging).
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.log(logging.DEBUG, msg, *args, **kwargs)


def get_logger(name: str) -> Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return Logger(name)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for applications embedding mimekind.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("mimekind").setLevel(log_level)

"""Logging setup for the booker command line."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

_PACKAGE_LOGGER = "booker"
_FORMAT = "%(levelname)s -> %(message)s"


@contextmanager
def cli_logging(level: str = "WARNING") -> Iterator[logging.Logger]:
    """Send package log records to stderr for the duration of a CLI run.

    The handler is removed on exit, so running the CLI repeatedly in one
    process (tests) neither duplicates output nor keeps a stale stream.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Case insensitive.

    Yields:
        The package logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    previous_level = logger.level
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)

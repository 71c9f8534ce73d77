"""Logging utilities for the wordsmith board."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn ``"debug"``/``"INFO"``/``10`` into a logging level, defaulting to INFO."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Route board logging through one stream handler.

    The board logs placements and rejections at DEBUG. The CLI reports a
    skipped placement at ERROR, so the default level shows one line per
    failure. ``stream`` defaults to stderr.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsmith")

"""Logging utilities tailored for crossword layout."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "CROSSWORD_LOG_LEVEL"


def default_level() -> int:
    """Resolve the default level from ``CROSSWORD_LOG_LEVEL`` (INFO if unset)."""

    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """Configure root logging with a compact formatter.

    Layout runs can try thousands of positions, so per-attempt detail is
    emitted at DEBUG and only run summaries at INFO.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(default_level() if level is None else level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "personal_crossword")

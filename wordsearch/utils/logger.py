"""Logging setup for the word search generator.

Every log record goes to stderr so that stdout carries only the puzzle
report. Engine phases log summaries at INFO, individual word outcomes at
DEBUG, and absorbed input problems (such as skipped files) at WARNING.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_NAME = "wordsearch"
DEFAULT_LEVEL = logging.WARNING


def configure_logging(level: int = DEFAULT_LEVEL) -> None:
    """Install a single stderr handler on the root logger at ``level``."""

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``wordsearch`` namespace.

    Library use without :func:`configure_logging` still surfaces warnings.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    if not name or name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name or ROOT_NAME)
    return logging.getLogger(f"{ROOT_NAME}.{name}")

# seasonip/utils/logging.py

from __future__ import annotations
import logging
import sys
from typing import IO, Optional

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_ROOT_NAME = "seasonip"


def setup_logging(level: int = logging.WARNING, stream: Optional[IO[str]] = None) -> None:
    """
    Point the package logger at ``stream`` (stderr by default).

    Each call replaces the handlers from the previous one, so the
    stream in effect at call time is the one that gets the records.
    stdout is left alone, it carries the program output.
    """
    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(level)

    # Clear any existing handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package namespace."""
    if not name.startswith(_ROOT_NAME):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)

"""Structured logging setup for gmr-scribe.

Log records go to *stderr* with ISO 8601 timestamps and pipe-separated
fields, leaving *stdout* free for the command summaries printed by
:mod:`gmr_scribe.output`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks handlers added by setup_logging so repeated calls are idempotent
# without touching handlers added externally.
_HANDLER_ATTR = "_gmr_scribe_log_handler"


def resolve_level(verbose: bool, default: str = "INFO") -> str:
    """Return ``"DEBUG"`` when *verbose* is set, otherwise *default*."""
    return "DEBUG" if verbose else default.upper()


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger with the gmr-scribe formatter.

    Calling this function multiple times is safe: the existing handler
    is reused and only its level is updated.

    Args:
        level: A standard logging level name (e.g. ``"DEBUG"``,
            ``"INFO"``, ``"WARNING"``).
        stream: Destination for log output.  Defaults to *stderr*.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)

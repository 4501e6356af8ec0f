"""Data models for gmr-scribe."""

from __future__ import annotations

from gmr_scribe.models.style import DEFAULT_STYLE, DocumentStyle, StyleError, load_style
from gmr_scribe.models.transcript import ParseWarning, Segment, TranscriptParseResult

__all__ = [
    "DEFAULT_STYLE",
    "DocumentStyle",
    "ParseWarning",
    "Segment",
    "StyleError",
    "TranscriptParseResult",
    "load_style",
]

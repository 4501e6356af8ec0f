"""gmr-scribe: transcribe audio and format annotated transcripts.

Runs the ``whisper`` speech-to-text engine on recordings and renders
hand-annotated transcripts as GMR-style ``.docx`` documents.
"""

from __future__ import annotations

from gmr_scribe.exceptions import (
    AudioNotFoundError,
    GmrScribeError,
    InputNotFoundError,
    RenderError,
    StrictModeError,
    TranscriptionError,
    UsageError,
)
from gmr_scribe.models.style import DEFAULT_STYLE, DocumentStyle, load_style
from gmr_scribe.models.transcript import ParseWarning, Segment, TranscriptParseResult
from gmr_scribe.parser import (
    extract_speakers,
    format_segments,
    parse_transcript,
    parse_transcript_file,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_STYLE",
    "AudioNotFoundError",
    "DocumentStyle",
    "GmrScribeError",
    "InputNotFoundError",
    "ParseWarning",
    "RenderError",
    "Segment",
    "StrictModeError",
    "TranscriptParseResult",
    "TranscriptionError",
    "UsageError",
    "extract_speakers",
    "format_segments",
    "load_style",
    "parse_transcript",
    "parse_transcript_file",
]

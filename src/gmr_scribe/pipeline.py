"""Command orchestration for the transcribe and format workflows.

Each entry point performs its directory setup once, wires the components
together, and returns a result dataclass suitable for rendering by
:mod:`gmr_scribe.output`.  Failures are raised as
:class:`~gmr_scribe.exceptions.GmrScribeError` subclasses.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from gmr_scribe.config import Settings, ensure_directory
from gmr_scribe.exceptions import InputNotFoundError, StrictModeError, UsageError
from gmr_scribe.models.style import DEFAULT_STYLE, DocumentStyle
from gmr_scribe.models.transcript import ParseWarning
from gmr_scribe.parser import format_segments, parse_transcript_file
from gmr_scribe.renderer import (
    DOCUMENT_EXTENSION,
    output_name_for,
    render_document,
)
from gmr_scribe.transcriber import (
    TranscriptionResult,
    WhisperRunner,
    list_available,
    resolve_audio_file,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------


@dataclass
class TranscribeResult:
    """Aggregated result of the ``transcribe`` command.

    Attributes:
        transcription: Engine outcome with artifact paths.
        created_dirs: Directories that had to be created for this run.
        duration_seconds: Wall-clock time for the run.
    """

    transcription: TranscriptionResult
    created_dirs: list[Path] = field(default_factory=list)
    duration_seconds: float = 0.0


@dataclass
class FormatResult:
    """Aggregated result of the ``format`` command.

    Attributes:
        notes_path: The annotated transcript that was parsed.
        title: Document title derived from the notes file name.
        speaker_line: Speakers shown in the document header.
        segment_count: Number of speaker segments rendered.
        duration: Duration text shown in the document.
        output_path: Written document, or ``None`` on a dry run.
        warnings: Content the parser discarded.
        preview: ``SPEAKER: text`` lines (dry run only).
        created_dirs: Directories that had to be created for this run.
        dry_run: Whether writing the document was skipped.
    """

    notes_path: Path
    title: str
    speaker_line: str = ""
    segment_count: int = 0
    duration: str = ""
    output_path: Path | None = None
    warnings: list[ParseWarning] = field(default_factory=list)
    preview: str = ""
    created_dirs: list[Path] = field(default_factory=list)
    dry_run: bool = False


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def run_transcribe(
    audio_name: str,
    settings: Settings,
    runner: WhisperRunner | None = None,
) -> TranscribeResult:
    """Transcribe ``<audio dir>/<audio_name>`` into the transcripts folder.

    Raises:
        UsageError: If *audio_name* is empty.
        AudioNotFoundError: If the audio file does not exist.
        TranscriptionError: If the engine fails.
    """
    if not audio_name:
        raise UsageError("Please provide an audio file name")

    created = [d for d in (settings.audio_dir, settings.transcripts_dir) if ensure_directory(d)]

    audio_path = resolve_audio_file(settings.audio_dir, audio_name)

    if runner is None:
        runner = WhisperRunner(
            binary=settings.whisper_binary,
            model=settings.whisper_model,
            language=settings.whisper_language,
        )

    start = time.monotonic()
    transcription = runner.transcribe(audio_path, settings.transcripts_dir)
    elapsed = time.monotonic() - start

    return TranscribeResult(
        transcription=transcription,
        created_dirs=created,
        duration_seconds=round(elapsed, 2),
    )


def parse_duration(raw: str) -> str:
    """Validate the duration argument as a positive number of minutes.

    Returns the argument as typed, minus surrounding whitespace, so the
    document shows exactly what the user entered.

    Raises:
        UsageError: If *raw* is not a positive number.
    """
    try:
        minutes = float(raw)
    except (TypeError, ValueError):
        raise UsageError(f"Duration must be a number of minutes, got {raw!r}") from None
    if not minutes > 0 or minutes == float("inf"):
        raise UsageError(f"Duration must be a positive number of minutes, got {raw!r}")
    return raw.strip()


def run_format(
    notes_name: str,
    duration: str,
    settings: Settings,
    style: DocumentStyle = DEFAULT_STYLE,
    strict: bool = False,
    dry_run: bool = False,
) -> FormatResult:
    """Render ``<transcripts dir>/<notes_name>`` as a GMR document.

    *duration* is shown verbatim; validate it with :func:`parse_duration`.

    Raises:
        UsageError: If *notes_name* is empty.
        InputNotFoundError: If the notes file does not exist.
        StrictModeError: If *strict* is set and the parser discarded content.
        RenderError: If the document cannot be written.
    """
    if not notes_name:
        raise UsageError("Please provide a notes file name")

    created = [settings.formatted_dir] if ensure_directory(settings.formatted_dir) else []

    notes_path = settings.transcripts_dir / notes_name
    if not notes_path.is_file():
        raise InputNotFoundError(notes_path, list_available(settings.transcripts_dir))

    logger.info("Reading transcript %s", notes_path)
    parsed = parse_transcript_file(notes_path, strict=strict)
    logger.info("Detected speakers: %s", parsed.speaker_line or "none")

    if strict and parsed.warnings:
        raise StrictModeError(parsed.warnings)

    title = output_name_for(notes_name)
    result = FormatResult(
        notes_path=notes_path,
        title=title,
        speaker_line=parsed.speaker_line,
        segment_count=len(parsed.segments),
        duration=duration,
        warnings=parsed.warnings,
        created_dirs=created,
        dry_run=dry_run,
    )

    if dry_run:
        result.preview = format_segments(parsed.segments)
        return result

    output_path = settings.formatted_dir / f"{title}{DOCUMENT_EXTENSION}"
    result.output_path = render_document(
        title,
        parsed.speaker_line,
        duration,
        parsed.segments,
        output_path,
        style=style,
    )
    return result

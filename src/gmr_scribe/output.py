"""Console output for the transcribe and format commands.

Renders pipeline results and error hints as plain text.  The
``format_*`` functions return strings; the ``print_*`` wrappers write them
to stdout (results) or stderr (errors).
"""

from __future__ import annotations

import sys
from pathlib import Path

from gmr_scribe.exceptions import AudioNotFoundError, InputNotFoundError, StrictModeError
from gmr_scribe.pipeline import FormatResult, TranscribeResult

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH

_TRANSCRIBE_NEXT_STEPS = (
    "Review the .txt file for accuracy",
    "Use the .srt file to find timestamps for [inaudible] marks",
    "Add speaker labels (Interviewer/Interviewee or actual names)",
    "Run 'gmr-scribe format' on the annotated notes file",
)

_FORMAT_NEXT_STEPS = (
    "Open the document in Word/Pages",
    "Review for accuracy",
    "Check speaker labels are correct",
    "Verify formatting matches GMR guidelines",
    "Manually replace -- with en-dash where needed",
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_transcribe_result(result: TranscribeResult) -> str:
    """Render a :class:`TranscribeResult` with artifact paths and next steps."""
    lines: list[str] = []
    _append_banner(lines, "TRANSCRIPTION COMPLETE")
    _append_created_dirs(lines, result.created_dirs)

    transcription = result.transcription
    lines.append(f"  Input: {transcription.audio_path}")
    written = transcription.existing_artifacts()
    if written:
        lines.append("  Outputs:")
        for fmt, path in written.items():
            lines.append(f"    {fmt:<5} {path}")
    else:
        lines.append("  Outputs: none found (check the engine output above)")
    lines.append(f"  Duration: {result.duration_seconds:.1f}s")

    _append_next_steps(lines, _TRANSCRIBE_NEXT_STEPS)
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_format_result(result: FormatResult) -> str:
    """Render a :class:`FormatResult`.

    A dry run shows the parsed segments instead of the output path.
    """
    lines: list[str] = []
    _append_banner(lines, "DRY RUN" if result.dry_run else "DOCUMENT CREATED")
    _append_created_dirs(lines, result.created_dirs)

    lines.append(f"  Input: {result.notes_path}")
    lines.append(f"  Title: {result.title}")
    lines.append(f"  Speakers: {result.speaker_line or 'none'}")
    lines.append(f"  Segments: {result.segment_count}")
    lines.append(f"  Duration: {result.duration} minutes")

    if result.warnings:
        lines.append("")
        lines.append(f"  Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            lines.append(f"    line {warning.line_number}: {warning.message}")

    if result.dry_run:
        lines.append("")
        lines.append(result.preview if result.preview else "  (no segments)")
    else:
        lines.append(f"  Output: {result.output_path}")
        _append_next_steps(lines, _FORMAT_NEXT_STEPS)

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_not_found(exc: InputNotFoundError) -> str:
    """Render a not-found error with the files that are available instead."""
    folder = exc.path.parent
    lines = [f"Error: {exc}"]
    if isinstance(exc, AudioNotFoundError):
        lines.append(f"Make sure your audio file is in the {folder} folder")
    if exc.available:
        lines.append(f"Available files in {folder}:")
        lines.extend(f"  - {name}" for name in exc.available)
    else:
        lines.append(f"The {folder} folder is empty. Add your files there first.")
    return "\n".join(lines)


def format_strict_failure(exc: StrictModeError) -> str:
    """Render every warning that made a strict parse fail."""
    lines = [f"Error: {exc}"]
    for warning in exc.warnings:
        lines.append(f"  line {warning.line_number}: {warning.message}: {warning.raw_line.strip()}")
    return "\n".join(lines)


def print_transcribe_result(result: TranscribeResult) -> None:
    sys.stdout.write(format_transcribe_result(result) + "\n")


def print_format_result(result: FormatResult) -> None:
    sys.stdout.write(format_format_result(result) + "\n")


def print_error(message: str) -> None:
    sys.stderr.write(message + "\n")


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_banner(lines: list[str], heading: str) -> None:
    lines.append(_SEPARATOR)
    lines.append(f"  {heading}")
    lines.append(_SEPARATOR)


def _append_created_dirs(lines: list[str], created_dirs: list[Path]) -> None:
    for directory in created_dirs:
        lines.append(f"  Created {directory}/ directory")


def _append_next_steps(lines: list[str], steps: tuple[str, ...]) -> None:
    lines.append("")
    lines.append("  Next steps:")
    for idx, step in enumerate(steps, start=1):
        lines.append(f"    {idx}. {step}")

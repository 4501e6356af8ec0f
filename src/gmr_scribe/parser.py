"""Transcript parser for annotated transcripts with trailing speaker labels.

Parses text where each speaker turn starts on a line of the form
``spoken text (SPEAKER)`` into structured
:class:`~gmr_scribe.models.transcript.TranscriptParseResult` objects.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from gmr_scribe.models.transcript import ParseWarning, Segment, TranscriptParseResult

logger = logging.getLogger(__name__)

# Matches lines like: spoken text (SPEAKER)
# The token may not contain whitespace or parentheses, so asides such as
# "(not sure what)" never count as labels.
_LABEL_RE = re.compile(r"^(.*?)\s*\(([^\s()]+)\)$")

# Any parenthesized single token anywhere in the text.
_TOKEN_RE = re.compile(r"\(([^\s()]+)\)")

_LEADING_TEXT_MSG = "Text before first speaker label discarded"
_EMPTY_LABEL_MSG = "Speaker label has no text"


def parse_transcript(
    text: str,
    source: str = "<string>",
    strict: bool = False,
) -> TranscriptParseResult:
    """Parse an annotated transcript string into speaker segments.

    Args:
        text: The raw transcript text.  A line ending in a parenthesized
            token such as ``(BOB)`` starts a new turn; the text before the
            token is the start of that turn.  Any other non-blank line
            continues the current turn and is joined with a single space.
        source: Label for the transcript origin (e.g. a file path).
            Defaults to ``"<string>"``.
        strict: When ``True``, discarded content is logged at WARNING
            level instead of DEBUG.  The returned segments are the same
            either way.

    Returns:
        A :class:`TranscriptParseResult` containing the segments in
        order, the sorted speaker set, and a warning for every piece of
        content that was dropped (text before the first label, labels
        with no text).
    """
    # Fast path: empty or whitespace-only input.
    if not text or not text.strip():
        logger.info("Empty transcript: %s", source)
        return TranscriptParseResult(source=source)

    segments: list[Segment] = []
    warnings: list[ParseWarning] = []

    cur_speaker: str | None = None
    cur_text = ""
    cur_line_number = 0
    cur_raw_line = ""
    leading_line_number = 0
    leading_raw_line = ""

    for line_idx, raw_line in enumerate(text.split("\n")):
        line_number = line_idx + 1
        trimmed = raw_line.strip()

        # Blank lines neither flush nor contribute.
        if not trimmed:
            continue

        match = _LABEL_RE.match(trimmed)
        if match is None:
            if cur_speaker is None and not leading_line_number:
                leading_line_number = line_number
                leading_raw_line = raw_line
            cur_text += " " + trimmed
            continue

        if cur_speaker is not None:
            if cur_text:
                segments.append(
                    Segment(
                        speaker=cur_speaker,
                        text=cur_text.strip(),
                        line_number=cur_line_number,
                    )
                )
            else:
                warnings.append(ParseWarning(cur_line_number, _EMPTY_LABEL_MSG, cur_raw_line))
        elif cur_text:
            warnings.append(
                ParseWarning(leading_line_number, _LEADING_TEXT_MSG, leading_raw_line)
            )

        cur_speaker = match.group(2)
        cur_text = match.group(1)
        cur_line_number = line_number
        cur_raw_line = raw_line

    # Flush the last segment.
    if cur_speaker is not None:
        if cur_text:
            segments.append(
                Segment(speaker=cur_speaker, text=cur_text.strip(), line_number=cur_line_number)
            )
        else:
            warnings.append(ParseWarning(cur_line_number, _EMPTY_LABEL_MSG, cur_raw_line))
    elif cur_text:
        warnings.append(ParseWarning(leading_line_number, _LEADING_TEXT_MSG, leading_raw_line))

    level = logging.WARNING if strict else logging.DEBUG
    for warning in warnings:
        logger.log(level, "%s (line %d): %s", warning.message, warning.line_number, warning.raw_line)

    speakers = sorted({segment.speaker for segment in segments})

    logger.info(
        "Parsed %d segments from %d speakers (%d warnings)",
        len(segments),
        len(speakers),
        len(warnings),
    )

    return TranscriptParseResult(
        segments=segments,
        speakers=speakers,
        warnings=warnings,
        source=source,
    )


def parse_transcript_file(file_path: str | Path, strict: bool = False) -> TranscriptParseResult:
    """Parse a transcript file into speaker segments.

    Reads the file at *file_path* as UTF-8 text and delegates to
    :func:`parse_transcript`.  A leading byte-order mark is dropped, and
    bytes that are not valid UTF-8 are replaced with U+FFFD so that files
    saved in a legacy encoding still parse.

    Args:
        file_path: Path to the transcript file.
        strict: Forwarded to :func:`parse_transcript`.

    Returns:
        A :class:`TranscriptParseResult` with ``source`` set to the
        string representation of *file_path*.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    data = path.read_bytes()
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning(
            "Transcript %s is not valid UTF-8 (first bad byte 0x%02x); "
            "undecodable bytes replaced",
            path,
            exc.object[exc.start],
        )
        text = data.decode("utf-8-sig", errors="replace")
    return parse_transcript(text, source=str(path), strict=strict)


def extract_speakers(text: str) -> str:
    """Return every parenthesized single token in *text*, sorted and joined.

    This scans the whole text rather than line endings, so it can report
    tokens that :func:`parse_transcript` never treats as labels.  Prefer
    :attr:`TranscriptParseResult.speaker_line` for anything derived from
    the segments.

    >>> extract_speakers("a (BOB) b (ALICE) c (BOB)")
    'ALICE, BOB'
    """
    return ", ".join(sorted(set(_TOKEN_RE.findall(text))))


def format_segments(segments: Iterable[Segment]) -> str:
    """Render segments as ``SPEAKER: text`` lines."""
    return "\n".join(f"{segment.speaker}: {segment.text}" for segment in segments)

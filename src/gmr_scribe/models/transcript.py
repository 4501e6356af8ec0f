"""Transcript data models for annotated transcripts.

These dataclasses represent the structured output of the transcript parser.
They are plain stdlib dataclasses; only the externally supplied document
style goes through Pydantic validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Segment:
    """A single speaker turn in an annotated transcript.

    Attributes:
        speaker: Speaker token taken verbatim from the parentheses at the
            end of a label line.
        text: Spoken text of the turn, space-joined across continuation
            lines and trimmed.
        line_number: 1-based line number of the label line that opened
            this segment.
    """

    speaker: str
    text: str
    line_number: int = 0


@dataclass(frozen=True)
class ParseWarning:
    """Content the parser discarded while segmenting a transcript.

    Attributes:
        line_number: 1-based line number of the problematic line.
        message: Human-readable description of the issue.
        raw_line: The original line text that triggered the warning.
    """

    line_number: int
    message: str
    raw_line: str


@dataclass(frozen=True)
class TranscriptParseResult:
    """Top-level return type from the transcript parser.

    Attributes:
        segments: Parsed speaker turns, in order of appearance.
        speakers: Distinct speaker tokens, sorted lexicographically.
        warnings: Discarded-content warnings encountered while parsing.
        source: File path of the parsed transcript, or ``"<string>"``
            when parsing from a string.
    """

    segments: list[Segment] = field(default_factory=list)
    speakers: list[str] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)
    source: str = "<string>"

    @property
    def speaker_line(self) -> str:
        """Speakers joined for display, e.g. ``"ALICE, BOB"``."""
        return ", ".join(self.speakers)

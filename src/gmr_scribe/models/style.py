"""Style configuration for rendered GMR documents.

Every fixed constant of the GMR layout lives on :class:`DocumentStyle`.
The defaults reproduce the house style; a JSON file of overrides can be
loaded with :func:`load_style`, and Pydantic validates it on the way in.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_HEX_COLOR_RE = re.compile(r"^[0-9A-Fa-f]{6}$")


class StyleError(Exception):
    """Raised when a style override file cannot be read or validated."""


class DocumentStyle(BaseModel):
    """Fonts, margins, rules and fixed text of the GMR document layout.

    Attributes:
        font_name: Font family used by every run.
        font_size_pt: Font size in points.
        margin_top_in: Top page margin in inches.
        margin_bottom_in: Bottom page margin in inches.
        margin_left_in: Left page margin in inches.
        margin_right_in: Right page margin in inches.
        rule_color: Hex color of the header and footer rules.
        rule_size: Rule width in eighths of a point.
        rule_space: Gap between rule and text in points.
        link_color: Hex color of the footer link text.
        footer_link_text: Underlined footer text.
        footer_suffix: Plain text following the footer link.
        closing_marker: Paragraph written after the last segment.
        duration_template: Format string for the duration paragraph;
            must contain ``{duration}``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    font_name: str = Field(default="Times New Roman", min_length=1)
    font_size_pt: float = Field(default=12, gt=0)
    margin_top_in: float = Field(default=1.25, gt=0)
    margin_bottom_in: float = Field(default=1.25, gt=0)
    margin_left_in: float = Field(default=0.5, gt=0)
    margin_right_in: float = Field(default=0.5, gt=0)
    rule_color: str = "000000"
    rule_size: int = Field(default=12, gt=0)
    rule_space: int = Field(default=1, ge=0)
    link_color: str = "0000FF"
    footer_link_text: str = "www.gmrtranscription.com"
    footer_suffix: str = " -"
    closing_marker: str = "[End of Audio]"
    duration_template: str = "Duration: {duration} minutes"

    @field_validator("rule_color", "link_color")
    @classmethod
    def _check_hex_color(cls, value: str) -> str:
        if not _HEX_COLOR_RE.match(value):
            raise ValueError(f"expected a 6-digit hex color, got {value!r}")
        return value.upper()

    @field_validator("duration_template")
    @classmethod
    def _check_duration_placeholder(cls, value: str) -> str:
        if "{duration}" not in value:
            raise ValueError("duration_template must contain '{duration}'")
        return value

    def duration_text(self, duration: str) -> str:
        """Return the duration paragraph text for *duration*."""
        return self.duration_template.replace("{duration}", duration)


DEFAULT_STYLE = DocumentStyle()


def load_style(path: str | Path) -> DocumentStyle:
    """Load style overrides from a JSON file.

    Keys not present in the file keep their default values.

    Args:
        path: Path to a JSON object whose keys are :class:`DocumentStyle`
            field names.

    Returns:
        A validated :class:`DocumentStyle`.

    Raises:
        StyleError: If the file is missing, unreadable, or fails validation.
    """
    style_path = Path(path)
    try:
        raw = style_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StyleError(f"Cannot read style file {style_path}: {exc}") from exc

    try:
        return DocumentStyle.model_validate_json(raw)
    except ValidationError as exc:
        raise StyleError(f"Invalid style file {style_path}: {exc}") from exc

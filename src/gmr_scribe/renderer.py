"""GMR document renderer.

Builds a ``.docx`` document from parsed speaker segments using
python-docx.  Layout constants come from a
:class:`~gmr_scribe.models.style.DocumentStyle`; this module only decides
*where* each piece goes:

- **Header** -- the title, then the speaker line with a rule beneath it.
- **Body** -- one justified ``SPEAKER:<tab>text`` paragraph per segment,
  followed by the closing marker and the duration statement.
- **Footer** -- the GMR link text above a rule.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from gmr_scribe.exceptions import RenderError
from gmr_scribe.models.style import DEFAULT_STYLE, DocumentStyle
from gmr_scribe.models.transcript import Segment

logger = logging.getLogger(__name__)

NOTES_SUFFIX = " - notes"
DOCUMENT_EXTENSION = ".docx"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_document(
    title: str,
    speaker_line: str,
    duration: str,
    segments: Sequence[Segment],
    style: DocumentStyle = DEFAULT_STYLE,
) -> DocxDocument:
    """Build the GMR document in memory.

    Args:
        title: Header title, usually the notes file name without suffix.
        speaker_line: Comma-separated speaker tokens for the second
            header line.
        duration: Duration in minutes, already formatted for display.
        segments: Speaker segments in transcript order.  May be empty.
        style: Layout constants.

    Returns:
        The python-docx document, not yet saved.
    """
    document = Document()
    section = document.sections[0]
    section.top_margin = Inches(style.margin_top_in)
    section.bottom_margin = Inches(style.margin_bottom_in)
    section.left_margin = Inches(style.margin_left_in)
    section.right_margin = Inches(style.margin_right_in)

    # --- Header --------------------------------------------------------
    header = section.header
    title_para = header.paragraphs[0]
    title_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _add_run(title_para, title, style, bold=True)

    speakers_para = header.add_paragraph()
    _add_rule(speakers_para, "bottom", style)
    speakers_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _add_run(speakers_para, speaker_line, style, bold=True)

    # --- Footer --------------------------------------------------------
    footer_para = section.footer.paragraphs[0]
    _add_rule(footer_para, "top", style)
    footer_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    link = _add_run(footer_para, style.footer_link_text, style)
    link.font.color.rgb = RGBColor.from_string(style.link_color)
    link.font.underline = True
    _add_run(footer_para, style.footer_suffix, style)

    # --- Body ----------------------------------------------------------
    for segment in segments:
        para = document.add_paragraph()
        para.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        _add_run(para, f"{segment.speaker}:\t", style, bold=True)
        _add_run(para, segment.text, style)

    document.add_paragraph("")
    _add_run(document.add_paragraph(), style.closing_marker, style, bold=True)
    document.add_paragraph("")
    _add_run(document.add_paragraph(), style.duration_text(duration), style, bold=True)

    logger.debug("Built document %r with %d segment paragraphs", title, len(segments))
    return document


def render_document(
    title: str,
    speaker_line: str,
    duration: str,
    segments: Sequence[Segment],
    output_path: Path,
    style: DocumentStyle = DEFAULT_STYLE,
) -> Path:
    """Build the GMR document and write it to *output_path*.

    Returns:
        *output_path*, for chaining.

    Raises:
        RenderError: If the document cannot be built or written.  A
            partially written file is left in place.
    """
    try:
        document = build_document(title, speaker_line, duration, segments, style)
        document.save(str(output_path))
    except (OSError, ValueError) as exc:
        raise RenderError(f"Error creating document {output_path}: {exc}") from exc

    logger.info("Wrote %s", output_path)
    return output_path


def output_name_for(notes_filename: str) -> str:
    """Return the document title derived from a notes file name.

    The extension is dropped and the first ``" - notes"`` is removed, so
    ``"Episode 12 - notes.txt"`` becomes ``"Episode 12"``.
    """
    stem = Path(notes_filename).stem
    return stem.replace(NOTES_SUFFIX, "", 1)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _add_run(paragraph: Paragraph, text: str, style: DocumentStyle, bold: bool = False) -> Run:
    """Append a run in the document font to *paragraph*."""
    run = paragraph.add_run(text)
    run.font.name = style.font_name
    run.font.size = Pt(style.font_size_pt)
    if bold:
        run.bold = True
    return run


def _add_rule(paragraph: Paragraph, edge: str, style: DocumentStyle) -> None:
    """Draw a single horizontal rule on the *edge* side of *paragraph*.

    Must be called before the paragraph alignment is set: ``w:pBdr``
    precedes ``w:jc`` inside ``w:pPr``.
    """
    p_pr = paragraph._p.get_or_add_pPr()
    borders = OxmlElement("w:pBdr")
    rule = OxmlElement(f"w:{edge}")
    rule.set(qn("w:val"), "single")
    rule.set(qn("w:sz"), str(style.rule_size))
    rule.set(qn("w:space"), str(style.rule_space))
    rule.set(qn("w:color"), style.rule_color)
    borders.append(rule)
    p_pr.append(borders)

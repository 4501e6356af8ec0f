"""Unit tests for the GMR document renderer.

Documents are written to a temporary directory and reopened with
python-docx to inspect their structure.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from gmr_scribe.exceptions import RenderError
from gmr_scribe.models.style import DocumentStyle
from gmr_scribe.models.transcript import Segment
from gmr_scribe.renderer import (
    build_document,
    output_name_for,
    render_document,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_SEGMENTS = [
    Segment(speaker="BOB", text="Hello there", line_number=1),
    Segment(speaker="ALICE", text="How are you", line_number=2),
]


def _render(tmp_path: Path, segments: list[Segment] = _SEGMENTS, **kwargs):
    """Render to disk and reopen the document."""
    out = tmp_path / "out.docx"
    render_document("Podcast", "ALICE, BOB", "10", segments, out, **kwargs)
    return Document(str(out))


def _rule(paragraph, edge: str):
    p_pr = paragraph._p.pPr
    assert p_pr is not None
    borders = p_pr.find(qn("w:pBdr"))
    assert borders is not None
    return borders.find(qn(f"w:{edge}"))


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------


class TestBody:
    """Segment paragraphs and closing paragraphs."""

    def test_paragraph_sequence(self, tmp_path: Path) -> None:
        doc = _render(tmp_path)

        assert [p.text for p in doc.paragraphs] == [
            "BOB:\tHello there",
            "ALICE:\tHow are you",
            "",
            "[End of Audio]",
            "",
            "Duration: 10 minutes",
        ]

    def test_segment_paragraph_runs(self, tmp_path: Path) -> None:
        doc = _render(tmp_path)
        para = doc.paragraphs[0]

        assert para.alignment == WD_ALIGN_PARAGRAPH.JUSTIFY
        assert [r.text for r in para.runs] == ["BOB:\t", "Hello there"]
        assert para.runs[0].bold is True
        assert not para.runs[1].bold
        for run in para.runs:
            assert run.font.name == "Times New Roman"
            assert run.font.size == Pt(12)

    def test_closing_paragraphs_bold(self, tmp_path: Path) -> None:
        doc = _render(tmp_path)

        assert doc.paragraphs[3].runs[0].bold is True
        assert doc.paragraphs[5].runs[0].bold is True

    def test_empty_segments_still_valid(self, tmp_path: Path) -> None:
        """No segments: header, closing marker and duration only."""
        doc = _render(tmp_path, segments=[])

        assert [p.text for p in doc.paragraphs] == ["", "[End of Audio]", "", "Duration: 10 minutes"]
        assert doc.sections[0].header.paragraphs[0].text == "Podcast"

    def test_segment_text_preserved_verbatim(self, tmp_path: Path) -> None:
        segments = [Segment(speaker="dr.who", text="It's -- well (pause) odd", line_number=1)]

        doc = _render(tmp_path, segments=segments)

        assert doc.paragraphs[0].text == "dr.who:\tIt's -- well (pause) odd"


# ---------------------------------------------------------------------------
# Header, Footer, Page
# ---------------------------------------------------------------------------


class TestLayout:
    """Header, footer and margins."""

    def test_margins(self, tmp_path: Path) -> None:
        section = _render(tmp_path).sections[0]

        assert section.top_margin == Inches(1.25)
        assert section.bottom_margin == Inches(1.25)
        assert section.left_margin == Inches(0.5)
        assert section.right_margin == Inches(0.5)

    def test_header_lines(self, tmp_path: Path) -> None:
        header = _render(tmp_path).sections[0].header
        title, speakers = header.paragraphs[0], header.paragraphs[1]

        assert title.text == "Podcast"
        assert speakers.text == "ALICE, BOB"
        for para in (title, speakers):
            assert para.alignment == WD_ALIGN_PARAGRAPH.CENTER
            assert para.runs[0].bold is True

    def test_header_rule_under_speakers(self, tmp_path: Path) -> None:
        speakers = _render(tmp_path).sections[0].header.paragraphs[1]

        rule = _rule(speakers, "bottom")
        assert rule.get(qn("w:val")) == "single"
        assert rule.get(qn("w:sz")) == "12"
        assert rule.get(qn("w:space")) == "1"
        assert rule.get(qn("w:color")) == "000000"

    def test_rule_precedes_alignment(self, tmp_path: Path) -> None:
        """``w:pBdr`` must come before ``w:jc`` for Word to accept the file."""
        speakers = _render(tmp_path).sections[0].header.paragraphs[1]
        tags = [child.tag for child in speakers._p.pPr]

        assert tags.index(qn("w:pBdr")) < tags.index(qn("w:jc"))

    def test_footer(self, tmp_path: Path) -> None:
        footer = _render(tmp_path).sections[0].footer.paragraphs[0]

        assert footer.text == "www.gmrtranscription.com -"
        assert footer.alignment == WD_ALIGN_PARAGRAPH.CENTER
        link = footer.runs[0]
        assert link.font.color.rgb == RGBColor(0x00, 0x00, 0xFF)
        assert link.font.underline is True
        assert _rule(footer, "top").get(qn("w:val")) == "single"


# ---------------------------------------------------------------------------
# Style overrides
# ---------------------------------------------------------------------------


class TestStyleOverrides:
    """A custom DocumentStyle flows into every run."""

    def test_custom_style(self, tmp_path: Path) -> None:
        style = DocumentStyle(
            font_name="Arial",
            font_size_pt=11,
            closing_marker="[End of Recording]",
            duration_template="Length: {duration} min",
            margin_left_in=1,
        )

        doc = _render(tmp_path, style=style)

        assert doc.paragraphs[-3].text == "[End of Recording]"
        assert doc.paragraphs[-1].text == "Length: 10 min"
        assert doc.paragraphs[0].runs[0].font.name == "Arial"
        assert doc.paragraphs[0].runs[0].font.size == Pt(11)
        assert doc.sections[0].left_margin == Inches(1)


# ---------------------------------------------------------------------------
# Build / save
# ---------------------------------------------------------------------------


class TestRenderDocument:
    """Building in memory and writing to disk."""

    def test_build_document_in_memory(self) -> None:
        doc = build_document("T", "A", "5", _SEGMENTS)

        assert len(doc.paragraphs) == 6

    def test_returns_output_path(self, tmp_path: Path) -> None:
        out = tmp_path / "x.docx"

        assert render_document("T", "A", "5", _SEGMENTS, out) == out
        assert out.is_file()

    def test_unwritable_destination_raises_render_error(self, tmp_path: Path) -> None:
        out = tmp_path / "missing" / "x.docx"

        with pytest.raises(RenderError, match="Error creating document"):
            render_document("T", "A", "5", _SEGMENTS, out)


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


class TestNaming:
    """Output naming."""

    @pytest.mark.parametrize(
        ("notes", "expected"),
        [
            ("Stuff You Should Know Podcast - notes.txt", "Stuff You Should Know Podcast"),
            ("interview.txt", "interview"),
            ("a - notes - notes.txt", "a - notes"),
            ("no-extension", "no-extension"),
        ],
    )
    def test_output_name_for(self, notes: str, expected: str) -> None:
        assert output_name_for(notes) == expected

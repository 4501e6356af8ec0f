"""Unit tests for console output formatting."""

from __future__ import annotations

from pathlib import Path

import pytest

from gmr_scribe.exceptions import AudioNotFoundError, InputNotFoundError, StrictModeError
from gmr_scribe.models.transcript import ParseWarning
from gmr_scribe.output import (
    format_format_result,
    format_not_found,
    format_strict_failure,
    format_transcribe_result,
    print_error,
    print_format_result,
)
from gmr_scribe.pipeline import FormatResult, TranscribeResult
from gmr_scribe.transcriber import TranscriptionResult, artifact_paths


def _format_result(**overrides) -> FormatResult:
    values = {
        "notes_path": Path("/p/transcripts/Show - notes.txt"),
        "title": "Show",
        "speaker_line": "ALICE, BOB",
        "segment_count": 4,
        "duration": "10",
        "output_path": Path("/p/formatted/Show.docx"),
    }
    values.update(overrides)
    return FormatResult(**values)


class TestFormatResultOutput:
    """Tests for the format command summary."""

    def test_summary_fields(self) -> None:
        text = format_format_result(_format_result())

        assert "DOCUMENT CREATED" in text
        assert "Speakers: ALICE, BOB" in text
        assert "Segments: 4" in text
        assert "Duration: 10 minutes" in text
        assert "Output: /p/formatted/Show.docx" in text
        assert "Manually replace -- with en-dash where needed" in text

    def test_no_speakers(self) -> None:
        text = format_format_result(_format_result(speaker_line=""))

        assert "Speakers: none" in text

    def test_warnings_listed(self) -> None:
        warnings = [ParseWarning(2, "Speaker label has no text", "(BOB)")]

        text = format_format_result(_format_result(warnings=warnings))

        assert "Warnings (1):" in text
        assert "line 2: Speaker label has no text" in text

    def test_dry_run_shows_preview(self) -> None:
        result = _format_result(dry_run=True, output_path=None, preview="BOB: Hi")

        text = format_format_result(result)

        assert "DRY RUN" in text
        assert "BOB: Hi" in text
        assert "Output:" not in text

    def test_created_dirs_reported(self) -> None:
        text = format_format_result(_format_result(created_dirs=[Path("/p/formatted")]))

        assert "Created /p/formatted/ directory" in text

    def test_print_writes_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_format_result(_format_result())

        assert "DOCUMENT CREATED" in capsys.readouterr().out


class TestTranscribeResultOutput:
    """Tests for the transcribe command summary."""

    def test_lists_written_artifacts(self, tmp_path: Path) -> None:
        (tmp_path / "talk.txt").write_text("hi")
        transcription = TranscriptionResult(
            audio_path=tmp_path / "talk.mp3",
            artifacts=artifact_paths(tmp_path / "talk.mp3", tmp_path),
        )

        text = format_transcribe_result(TranscribeResult(transcription=transcription))

        assert "TRANSCRIPTION COMPLETE" in text
        assert str(tmp_path / "talk.txt") in text
        assert "talk.srt" not in text
        assert "Add speaker labels" in text

    def test_no_artifacts(self, tmp_path: Path) -> None:
        transcription = TranscriptionResult(audio_path=tmp_path / "talk.mp3")

        text = format_transcribe_result(TranscribeResult(transcription=transcription))

        assert "Outputs: none found" in text


class TestErrorOutput:
    """Tests for error hints."""

    def test_audio_not_found_with_alternatives(self) -> None:
        exc = AudioNotFoundError(Path("/p/audio/x.mp3"), ["a.mp3", "b.wav"])

        text = format_not_found(exc)

        assert text.startswith("Error: File not found: /p/audio/x.mp3")
        assert "Make sure your audio file is in the /p/audio folder" in text
        assert "  - a.mp3" in text
        assert "  - b.wav" in text

    def test_not_found_empty_folder(self) -> None:
        text = format_not_found(InputNotFoundError(Path("/p/transcripts/x.txt")))

        assert "folder is empty" in text
        assert "Make sure your audio" not in text

    def test_strict_failure(self) -> None:
        exc = StrictModeError([ParseWarning(1, "Text before first speaker label discarded", " intro ")])

        text = format_strict_failure(exc)

        assert "1 parse warning(s) in strict mode" in text
        assert "line 1: Text before first speaker label discarded: intro" in text

    def test_print_error_writes_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("Error: nope")

        captured = capsys.readouterr()
        assert captured.err == "Error: nope\n"
        assert captured.out == ""

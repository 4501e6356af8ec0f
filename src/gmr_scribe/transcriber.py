"""Transcription runner wrapping the ``whisper`` command-line program.

The engine is run as a subprocess and awaited to completion; it writes
every output format it supports next to each other in the transcripts
folder.  This module only builds the command, checks the exit status and
reports the artifact paths.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from gmr_scribe.exceptions import AudioNotFoundError, TranscriptionError

logger = logging.getLogger(__name__)

# Formats produced by ``--output_format all``.
ARTIFACT_FORMATS = ("txt", "srt", "vtt", "tsv", "json")


@dataclass(frozen=True)
class TranscriptionResult:
    """Outcome of one transcription run.

    Attributes:
        audio_path: The audio file that was transcribed.
        artifacts: Expected output path per format (``"txt"``, ``"srt"``, ...).
        stdout: Engine standard output.
        stderr: Engine standard error (progress messages, warnings).
    """

    audio_path: Path
    artifacts: dict[str, Path] = field(default_factory=dict)
    stdout: str = ""
    stderr: str = ""

    def existing_artifacts(self) -> dict[str, Path]:
        """Return only the artifacts that were actually written."""
        return {fmt: path for fmt, path in self.artifacts.items() if path.is_file()}


def list_available(directory: Path) -> list[str]:
    """Return sorted, non-hidden entry names in *directory*."""
    if not directory.is_dir():
        return []
    return sorted(p.name for p in directory.iterdir() if not p.name.startswith("."))


def resolve_audio_file(audio_dir: Path, name: str) -> Path:
    """Resolve *name* against the audio folder.

    Raises:
        AudioNotFoundError: If the file is absent.  The exception lists
            the files that are available instead.
    """
    audio_path = audio_dir / name
    if not audio_path.is_file():
        raise AudioNotFoundError(audio_path, list_available(audio_dir))
    return audio_path


def artifact_paths(audio_path: Path, output_dir: Path) -> dict[str, Path]:
    """Return the output path the engine uses for each format."""
    stem = audio_path.stem
    return {fmt: output_dir / f"{stem}.{fmt}" for fmt in ARTIFACT_FORMATS}


class WhisperRunner:
    """Runs the ``whisper`` CLI on a single audio file.

    Args:
        binary: Executable name or path.
        model: Model size passed to ``--model``.  ``medium`` balances
            speed and accuracy; the first run downloads the model.
        language: Spoken language passed to ``--language``.
    """

    def __init__(
        self,
        binary: str = "whisper",
        model: str = "medium",
        language: str = "English",
    ) -> None:
        self.binary = binary
        self.model = model
        self.language = language

    def build_command(self, audio_path: Path, output_dir: Path) -> list[str]:
        """Return the argument vector for transcribing *audio_path*."""
        return [
            self.binary,
            str(audio_path),
            "--model",
            self.model,
            "--language",
            self.language,
            "--task",
            "transcribe",
            "--output_format",
            "all",
            "--output_dir",
            str(output_dir),
        ]

    def transcribe(self, audio_path: Path, output_dir: Path) -> TranscriptionResult:
        """Run the engine and wait for it to finish.

        No timeout is applied; long recordings can take several minutes.

        Raises:
            TranscriptionError: If the engine cannot be started or exits
                with a non-zero status.  The message carries the engine's
                own error text.
        """
        command = self.build_command(audio_path, output_dir)
        logger.info("Running %s", " ".join(command))

        try:
            completed = subprocess.run(  # noqa: S603 - argv list, no shell
                command,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise TranscriptionError(f"Transcription failed: {exc}") from exc

        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"exit status {completed.returncode}"
            raise TranscriptionError(
                f"Transcription failed: {detail}",
                returncode=completed.returncode,
                stderr=completed.stderr,
            )

        logger.info("Transcription of %s finished", audio_path.name)
        return TranscriptionResult(
            audio_path=audio_path,
            artifacts=artifact_paths(audio_path, output_dir),
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

"""Custom exceptions for the gmr-scribe commands.

Exception hierarchy::

    GmrScribeError             (base for all command failures)
    +-- UsageError             (missing or invalid command-line argument)
    +-- InputNotFoundError     (referenced input file is absent)
    |   +-- AudioNotFoundError (audio file missing from the audio folder)
    +-- TranscriptionError     (external transcription engine failed)
    +-- RenderError            (document could not be built or written)
    +-- StrictModeError        (strict parse discarded content)

Every failure is terminal for the current invocation; nothing is retried.
"""

from __future__ import annotations

from pathlib import Path

from gmr_scribe.models.transcript import ParseWarning


class GmrScribeError(Exception):
    """Base exception for gmr-scribe command failures."""


class UsageError(GmrScribeError):
    """Raised when a required argument is missing or malformed."""


class InputNotFoundError(GmrScribeError):
    """Raised when a referenced input file does not exist.

    Attributes:
        path: The path that was looked up.
        available: Names of the files that *are* present in the
            searched directory, for a remediation hint.
    """

    def __init__(self, path: Path, available: list[str] | None = None) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path
        self.available = available or []


class AudioNotFoundError(InputNotFoundError):
    """Raised when the requested audio file is not in the audio folder."""


class TranscriptionError(GmrScribeError):
    """Raised when the transcription engine exits unsuccessfully.

    Attributes:
        returncode: Exit status of the engine, or ``None`` if it could
            not be started.
        stderr: The engine's error output, verbatim.
    """

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class RenderError(GmrScribeError):
    """Raised when the output document cannot be built or saved."""


class StrictModeError(GmrScribeError):
    """Raised in strict mode when parsing discarded transcript content.

    Attributes:
        warnings: The parse warnings that triggered the failure.
    """

    def __init__(self, warnings: list[ParseWarning]) -> None:
        super().__init__(f"{len(warnings)} parse warning(s) in strict mode")
        self.warnings = warnings

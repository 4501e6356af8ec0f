"""Configuration loading for gmr-scribe.

Reads settings from environment variables (with .env support via python-dotenv).
Every setting has a default, so an empty environment reproduces the
standard ``audio/``, ``transcripts/`` and ``formatted/`` layout under the
current directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

AUDIO_DIRNAME = "audio"
TRANSCRIPTS_DIRNAME = "transcripts"
FORMATTED_DIRNAME = "formatted"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        project_root: Directory holding the audio, transcripts and
            formatted folders.
        whisper_binary: Executable name or path of the transcription engine.
        whisper_model: Model passed to the engine's ``--model`` option.
        whisper_language: Language passed to ``--language``.
        log_level: Logging level (default ``"INFO"``).
    """

    project_root: Path
    whisper_binary: str = "whisper"
    whisper_model: str = "medium"
    whisper_language: str = "English"
    log_level: str = "INFO"

    @property
    def audio_dir(self) -> Path:
        return self.project_root / AUDIO_DIRNAME

    @property
    def transcripts_dir(self) -> Path:
        return self.project_root / TRANSCRIPTS_DIRNAME

    @property
    def formatted_dir(self) -> Path:
        return self.project_root / FORMATTED_DIRNAME


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``GMR_PROJECT_ROOT`` names something that is not a
            directory, or ``LOG_LEVEL`` is not a logging level name.
    """
    load_dotenv()

    root_raw = os.environ.get("GMR_PROJECT_ROOT", "").strip()
    project_root = Path(root_raw).expanduser() if root_raw else Path.cwd()
    if project_root.exists() and not project_root.is_dir():
        raise ConfigError(f"GMR_PROJECT_ROOT is not a directory: {project_root}")

    values: dict[str, str] = {}
    optional = {
        "WHISPER_BINARY": "whisper_binary",
        "WHISPER_MODEL": "whisper_model",
        "WHISPER_LANGUAGE": "whisper_language",
        "LOG_LEVEL": "log_level",
    }
    for env_var, field_name in optional.items():
        raw = os.environ.get(env_var, "").strip()
        if raw:
            values[field_name] = raw

    if "log_level" in values:
        level = values["log_level"].upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {values['log_level']!r}")
        values["log_level"] = level

    return Settings(project_root=project_root, **values)


def ensure_directory(path: Path) -> bool:
    """Create *path* (and parents) if it does not exist yet.

    Safe to call repeatedly.

    Args:
        path: Directory to create.

    Returns:
        ``True`` if the directory was created by this call, ``False`` if
        it already existed.
    """
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    logger.info("Created directory %s", path)
    return True

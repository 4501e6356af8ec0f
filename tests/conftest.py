"""Shared fixtures for gmr-scribe tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

_ENV_VARS = (
    "GMR_PROJECT_ROOT",
    "WHISPER_BINARY",
    "WHISPER_MODEL",
    "WHISPER_LANGUAGE",
    "LOG_LEVEL",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all gmr-scribe environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("gmr_scribe.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def project_root(tmp_path: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``GMR_PROJECT_ROOT`` at an empty temporary directory."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.setenv("GMR_PROJECT_ROOT", str(root))
    return root


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)

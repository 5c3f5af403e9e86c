"""Pytest configuration and fixtures for launcher tests."""

import os
from pathlib import Path

import pytest

from core.config import AppSettings
from core.logging_utils import reset_logging


class RecordingInstaller:
    """Install capability that records calls and optionally raises."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[Path] = []
        self.error = error

    def do_install(self, target: Path) -> None:
        self.calls.append(target)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real user config and log handlers."""
    for key in list(os.environ):
        if key.upper().startswith("OPTIFINE_LAUNCHER_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()


@pytest.fixture
def make_settings(tmp_path):
    """Build settings without reading any .env file."""

    def _make(**overrides) -> AppSettings:
        overrides.setdefault("log_file", tmp_path / "logs" / "launcher.log")
        return AppSettings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def recording_installer():
    return RecordingInstaller()


@pytest.fixture
def failing_installer():
    return RecordingInstaller(error=FileNotFoundError(2, "No such file or directory", "/tmp/missing.jar"))

"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, str]:
    """Point the history file at a temp dir and clear inherited settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("TEMPCONV_HISTORY_FILE", "TEMPCONV_DEFAULT_DIRECTION", "TEMPCONV_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    env = {
        "TEMPCONV_CONFIG_DIR": str(tmp_path / "config"),
        "TEMPCONV_HISTORY_BACKEND": "file",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env

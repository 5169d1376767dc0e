from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from zet.config import ZetConfig, load_config
from zet.notes import NoteStore


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ["ZET_HOME", "EDITOR"]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cfg(tmp_path: Path) -> ZetConfig:
    return load_config(tmp_path / "zet")


@pytest.fixture
def store(cfg: ZetConfig) -> NoteStore:
    s = NoteStore(cfg)
    s.init()
    return s


@pytest.fixture
def editor_calls(monkeypatch) -> list[list[str]]:
    """Replace the editor process; records each command line."""
    calls: list[list[str]] = []

    def fake_run(cmd, check=False):
        calls.append(list(cmd))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("zet.notes.subprocess.run", fake_run)
    return calls

"""Shared pytest fixtures for gaussref tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from gaussref.config.settings import GaussSettings
from gaussref.services.telemetry import disable_telemetry


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty temp directory with no GAUSSREF_* env overrides.

    Config discovery walks up from CWD, so tests must not see a stray
    gaussref.toml or environment variable from the developer's machine.
    """
    for key in list(os.environ):
        if key.startswith("GAUSSREF_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_cwd: Path) -> GaussSettings:
    """Default settings with no TOML file and no env overrides."""
    return GaussSettings.load(start=isolated_cwd)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Services enable telemetry when verbose; keep it off between tests."""
    yield
    disable_telemetry()

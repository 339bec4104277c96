"""Fixtures for CLI integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def no_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a settings path that does not exist."""
    monkeypatch.delenv("BUILDPATHS_PROJECT_ROOT", raising=False)
    return tmp_path / "missing-settings.json"

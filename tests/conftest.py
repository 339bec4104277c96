"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildpaths.core.context import BuildContext
from buildpaths.core.models import PackageKind, PackageRef
from tests.helpers.contexts import PROJECT_ROOT, TARGET, app_context, selftest_context


@pytest.fixture
def project_root() -> str:
    return PROJECT_ROOT


@pytest.fixture
def target() -> PackageRef:
    return PackageRef(TARGET, PackageKind.TARGET)


@pytest.fixture
def blinky_context() -> BuildContext:
    return app_context("apps/blinky")


@pytest.fixture
def unittest_context() -> BuildContext:
    return selftest_context("sys/log/full/selftest")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BUILDPATHS_PROJECT_ROOT", raising=False)


@pytest.fixture
def settings_file(tmp_path: Path):
    """Factory writing a settings JSON document under tmp_path."""

    def _write(content: str) -> Path:
        path = tmp_path / "settings.json"
        path.write_text(content)
        return path

    return _write

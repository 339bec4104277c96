"""Unit tests for settings loading and precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildpaths.settings import Settings, default_config_path, load_settings, resolve_project_root


def test_defaults_without_config(clean_env, tmp_path: Path) -> None:
    settings = load_settings(None, cwd=tmp_path)
    assert settings == Settings(project_root=str(tmp_path), json_output=False)


def test_missing_config_file_uses_defaults(clean_env, tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.json", cwd=Path("/work"))
    assert settings.project_root == "/work"


def test_config_file_values(clean_env, settings_file) -> None:
    path = settings_file('{"project_root": "/proj", "json_output": true}')
    assert load_settings(path) == Settings(project_root="/proj", json_output=True)


def test_env_overrides_config_file(monkeypatch: pytest.MonkeyPatch, settings_file) -> None:
    monkeypatch.setenv("BUILDPATHS_PROJECT_ROOT", "/from-env")
    path = settings_file('{"project_root": "/from-file"}')
    assert load_settings(path).project_root == "/from-env"


def test_rejects_non_object_config(clean_env, settings_file) -> None:
    with pytest.raises(ValueError, match="must contain a JSON object"):
        load_settings(settings_file("[1, 2]"))


def test_rejects_bad_field_types(clean_env, settings_file) -> None:
    with pytest.raises(ValueError, match="Invalid project_root"):
        load_settings(settings_file('{"project_root": 7}'))
    with pytest.raises(ValueError, match="Invalid json_output"):
        load_settings(settings_file('{"json_output": "yes"}'))


def test_cli_root_wins() -> None:
    settings = Settings(project_root="/from-settings")
    assert resolve_project_root(cli_root=Path("/from-cli"), settings=settings) == "/from-cli"
    assert resolve_project_root(cli_root=None, settings=settings) == "/from-settings"


def test_default_config_path_is_deterministic(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/tmp/buildpaths-home")
    assert default_config_path() == Path("/tmp/buildpaths-home/.config/buildpaths/settings.json")

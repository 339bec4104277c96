"""Tool settings: project root and output format."""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Optional


PROJECT_ROOT_ENV = "BUILDPATHS_PROJECT_ROOT"
_DEFAULT_JSON_OUTPUT = False


@dataclass(frozen=True)
class Settings:
    project_root: str
    json_output: bool = _DEFAULT_JSON_OUTPUT


def load_settings(path: Optional[Path], *, cwd: Optional[Path] = None) -> Settings:
    """Load settings from JSON config file, with environment variable overrides.

    Priority order:
    1. Environment variables (``BUILDPATHS_PROJECT_ROOT``)
    2. JSON config file
    3. Defaults (current directory, human-readable output)

    Args:
        path: Path to JSON config file, or None to use defaults only
        cwd: Directory used as the default project root

    Returns:
        Settings object with resolved values
    """
    json_settings = {}
    if path and path.exists():
        json_settings = json.loads(path.read_text())
        if not isinstance(json_settings, dict):
            raise ValueError(f"Settings file must contain a JSON object: {path}")

    default_root = str(cwd if cwd is not None else Path.cwd())
    project_root = os.getenv(PROJECT_ROOT_ENV) or json_settings.get("project_root", default_root)
    if not isinstance(project_root, str):
        raise ValueError(f"Invalid project_root in settings: {project_root!r}")

    json_output = json_settings.get("json_output", _DEFAULT_JSON_OUTPUT)
    if not isinstance(json_output, bool):
        raise ValueError(f"Invalid json_output in settings: {json_output!r}")

    return Settings(project_root=project_root, json_output=json_output)


def default_config_path() -> Path:
    return Path.home() / ".config" / "buildpaths" / "settings.json"


def resolve_project_root(*, cli_root: Optional[Path], settings: Settings) -> str:
    if cli_root is not None:
        return str(cli_root)
    return settings.project_root

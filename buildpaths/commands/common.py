"""Settings and logging setup shared by CLI commands."""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from buildpaths.errors import IOFailure
from buildpaths.settings import Settings, load_settings


def configure_logging(args: Namespace) -> None:
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def load_command_settings(args: Namespace) -> Settings:
    config_path = getattr(args, "config", None)
    try:
        return load_settings(Path(config_path) if config_path else None)
    except OSError as exc:
        raise IOFailure(f"Cannot read settings file {config_path}: {exc}") from exc

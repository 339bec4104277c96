"""Command-line interface for buildpaths."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from buildpaths.core.models import PackageKind
from buildpaths.settings import default_config_path


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        type=Path,
        help="Project root (overrides settings and BUILDPATHS_PROJECT_ROOT)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=default_config_path(),
        help="Settings path (default: ~/.config/buildpaths/settings.json)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="buildpaths",
        description="Deterministic artifact paths for multi-target firmware builds",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="buildpaths 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    paths_parser = subparsers.add_parser(
        "paths",
        help="Print artifact paths for a target build",
    )
    paths_parser.add_argument(
        "--target",
        required=True,
        help="Target canonical name (e.g. targets/nrf52_blinky)",
    )
    variant_group = paths_parser.add_mutually_exclusive_group(required=True)
    variant_group.add_argument("--app", help="App package for an app build")
    variant_group.add_argument("--loader", help="Loader package for a loader build")
    variant_group.add_argument("--test", help="Package under test for a test build")
    paths_parser.add_argument(
        "--kind",
        choices=[kind.value for kind in PackageKind],
        help="Kind of the bound package (default: app for app/loader, lib for test)",
    )
    _add_common_arguments(paths_parser)

    mfg_parser = subparsers.add_parser(
        "mfg",
        help="Print manufacturing image directories",
    )
    mfg_parser.add_argument(
        "mfg_package",
        help="Manufacturing package name",
    )
    _add_common_arguments(mfg_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "paths":
            from .commands.paths import run_paths
            return run_paths(args)
        elif args.command == "mfg":
            from .commands.mfg import run_mfg
            return run_mfg(args)
        else:
            parser.print_help()
            return 1
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        from .errors import exit_code_for_exception

        print(str(exc), file=sys.stderr)
        return exit_code_for_exception(exc)


if __name__ == "__main__":
    sys.exit(main())

"""Mfg command - print manufacturing image directories."""

from __future__ import annotations

from argparse import Namespace

from buildpaths.commands.common import configure_logging, load_command_settings
from buildpaths.commands.output import emit_output, path_lines
from buildpaths.core import paths
from buildpaths.errors import ValidationError
from buildpaths.settings import resolve_project_root


def run_mfg(args: Namespace, *, output_sink=print) -> int:
    configure_logging(args)
    if not args.mfg_package:
        raise ValidationError("mfg package name is required")
    settings = load_command_settings(args)
    project_root = resolve_project_root(cli_root=getattr(args, "root", None), settings=settings)
    artifacts = {
        "mfg_bin_dir": paths.mfg_bin_dir(project_root, args.mfg_package),
        "mfg_boot_dir": paths.mfg_boot_dir(project_root, args.mfg_package),
    }
    emit_output(
        command="mfg",
        payload={
            "project_root": project_root,
            "mfg_package": args.mfg_package,
            "artifacts": artifacts,
        },
        json_output=getattr(args, "json", False) or settings.json_output,
        output_sink=output_sink,
        human_lines=path_lines(artifacts),
    )
    return 0

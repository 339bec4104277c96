"""Paths command - print artifact locations for one build context."""

from __future__ import annotations

import logging
from argparse import Namespace

from buildpaths.commands.common import configure_logging, load_command_settings
from buildpaths.commands.output import emit_output, path_lines
from buildpaths.core.context import BuildContext
from buildpaths.core.models import BuildVariant, PackageKind, PackageRef, parse_package_kind
from buildpaths.core.session import artifact_paths
from buildpaths.errors import ValidationError
from buildpaths.settings import resolve_project_root

logger = logging.getLogger(__name__)

_DEFAULT_KINDS = {
    BuildVariant.APP: PackageKind.APP,
    BuildVariant.LOADER: PackageKind.APP,
    BuildVariant.TEST: PackageKind.LIB,
}


def _selected_variant(args: Namespace) -> tuple[BuildVariant, str]:
    selected = [
        (variant, value)
        for variant, value in (
            (BuildVariant.APP, getattr(args, "app", None)),
            (BuildVariant.LOADER, getattr(args, "loader", None)),
            (BuildVariant.TEST, getattr(args, "test", None)),
        )
        if value
    ]
    if len(selected) != 1:
        raise ValidationError("Exactly one of --app, --loader or --test is required")
    return selected[0]


def build_context_from_args(args: Namespace, *, project_root: str) -> BuildContext:
    if not args.target:
        raise ValidationError("--target is required")
    variant, pkg_name = _selected_variant(args)
    kind_value = getattr(args, "kind", None)
    try:
        kind = parse_package_kind(kind_value) if kind_value else _DEFAULT_KINDS[variant]
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    return BuildContext.for_variant(
        variant,
        project_root=project_root,
        target=PackageRef(args.target, PackageKind.TARGET),
        package=PackageRef(pkg_name, kind),
    )


def run_paths(args: Namespace, *, output_sink=print) -> int:
    """Print every artifact path for the requested build."""
    configure_logging(args)
    settings = load_command_settings(args)
    project_root = resolve_project_root(cli_root=getattr(args, "root", None), settings=settings)
    ctx = build_context_from_args(args, project_root=project_root)
    artifacts = artifact_paths(ctx)
    logger.debug("Resolved %d artifact paths for %s/%s", len(artifacts), ctx.target_name, ctx.build_name)

    payload = {
        "project_root": ctx.project_root,
        "target": ctx.target_name,
        "build_name": ctx.build_name,
        "artifacts": artifacts,
    }
    emit_output(
        command="paths",
        payload=payload,
        json_output=getattr(args, "json", False) or settings.json_output,
        output_sink=output_sink,
        human_lines=path_lines(artifacts),
    )
    return 0

"""Artifact accessors for a bound :class:`BuildContext`.

Thin delegation to :mod:`buildpaths.core.paths` using the context's target,
build name and packages. The app-scoped helpers that append a stem to
``pkg_bin_dir`` do not run a final sanitization pass; only the directory part
of their result is sanitized.
"""

from __future__ import annotations

import posixpath

from buildpaths.core import paths
from buildpaths.core.context import BuildContext
from buildpaths.core.models import PackageRef
from buildpaths.core.sanitize import filename_from_path
from buildpaths.errors import ValidationError

COMPILE_COMMANDS_FILENAME = "compile_commands.json"


def _app_package(ctx: BuildContext) -> PackageRef:
    if ctx.app_package is None:
        raise ValidationError(f"No app package bound for build '{ctx.build_name}'")
    return ctx.app_package


def _test_package(ctx: BuildContext) -> PackageRef:
    if ctx.test_package is None:
        raise ValidationError(f"No test package bound for build '{ctx.build_name}'")
    return ctx.test_package


def bin_dir(ctx: BuildContext) -> str:
    return paths.bin_dir(ctx.project_root, ctx.target_name, ctx.build_name)


def file_bin_dir(ctx: BuildContext, pkg_name: str) -> str:
    return paths.file_bin_dir(ctx.project_root, ctx.target_name, ctx.build_name, pkg_name)


def pkg_bin_dir(ctx: BuildContext, pkg: PackageRef) -> str:
    return paths.pkg_bin_dir(ctx.project_root, ctx.target_name, ctx.build_name, pkg.name, pkg.kind)


def archive_path(ctx: BuildContext, pkg: PackageRef) -> str:
    """Path of the package's ``.a`` file."""
    return paths.archive_path(ctx.project_root, ctx.target_name, ctx.build_name, pkg.name, pkg.kind)


def _app_stem_path(ctx: BuildContext, suffix: str) -> str:
    app = _app_package(ctx)
    return pkg_bin_dir(ctx, app) + "/" + filename_from_path(app.name) + suffix


def app_tentative_elf_path(ctx: BuildContext) -> str:
    return _app_stem_path(ctx, "_tmp.elf")


def app_elf_path(ctx: BuildContext) -> str:
    app = _app_package(ctx)
    return paths.app_elf_path(ctx.project_root, ctx.target_name, ctx.build_name, app.name)


def app_linker_elf_path(ctx: BuildContext) -> str:
    return _app_stem_path(ctx, "linker.elf")


def app_img_path(ctx: BuildContext) -> str:
    return _app_stem_path(ctx, ".img")


def app_hex_path(ctx: BuildContext) -> str:
    return _app_stem_path(ctx, ".hex")


def app_bin_path(ctx: BuildContext) -> str:
    return app_elf_path(ctx) + ".bin"


def app_bin_base_path(ctx: BuildContext) -> str:
    return _app_stem_path(ctx, "")


def app_path(ctx: BuildContext) -> str:
    return pkg_bin_dir(ctx, _app_package(ctx)) + "/"


def test_exe_path(ctx: BuildContext) -> str:
    test = _test_package(ctx)
    return paths.test_exe_path(ctx.project_root, ctx.target_name, ctx.build_name, test.name, test.kind)


def manifest_path(ctx: BuildContext) -> str:
    app = _app_package(ctx)
    return paths.manifest_path(ctx.project_root, ctx.target_name, ctx.build_name, app.name)


def compile_cmds_path(ctx: BuildContext) -> str:
    # App builds keep it beside the elf; test builds beside the test executable.
    if ctx.app_package is not None:
        base = posixpath.dirname(app_elf_path(ctx))
    else:
        base = posixpath.dirname(test_exe_path(ctx))
    return base + "/" + COMPILE_COMMANDS_FILENAME


def artifact_paths(ctx: BuildContext) -> dict[str, str]:
    """Every accessor that applies to the bound packages, in a stable order."""
    result = {
        "bin_root": paths.bin_root(ctx.project_root),
        "target_bin_dir": paths.target_bin_dir(ctx.project_root, ctx.target_name),
        "generated_src_dir": paths.generated_src_dir(ctx.project_root, ctx.target_name),
        "generated_include_dir": paths.generated_include_dir(ctx.project_root, ctx.target_name),
        "generated_bin_dir": paths.generated_bin_dir(ctx.project_root, ctx.target_name),
        "sysinit_archive_path": paths.sysinit_archive_path(ctx.project_root, ctx.target_name),
        "bin_dir": bin_dir(ctx),
    }
    if ctx.app_package is not None:
        result.update(
            {
                "app_pkg_bin_dir": pkg_bin_dir(ctx, ctx.app_package),
                "app_archive_path": archive_path(ctx, ctx.app_package),
                "app_tentative_elf_path": app_tentative_elf_path(ctx),
                "app_elf_path": app_elf_path(ctx),
                "app_linker_elf_path": app_linker_elf_path(ctx),
                "app_img_path": app_img_path(ctx),
                "app_hex_path": app_hex_path(ctx),
                "app_bin_path": app_bin_path(ctx),
                "app_bin_base_path": app_bin_base_path(ctx),
                "manifest_path": manifest_path(ctx),
            }
        )
    if ctx.test_package is not None:
        result.update(
            {
                "test_pkg_bin_dir": pkg_bin_dir(ctx, ctx.test_package),
                "test_archive_path": archive_path(ctx, ctx.test_package),
                "test_exe_path": test_exe_path(ctx),
            }
        )
    if ctx.app_package is not None or ctx.test_package is not None:
        result["compile_cmds_path"] = compile_cmds_path(ctx)
    return result

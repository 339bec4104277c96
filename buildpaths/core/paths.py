"""Artifact locations for a project's bin tree.

Every function here is a pure string computation over explicit build
coordinates: the project root, the target's canonical name, the build name
(``app``, ``loader`` or a test build name), and for per-package artifacts the
package's canonical name and kind. Nothing touches the filesystem.

Sanitization is applied per accessor, not uniformly. Most accessors run
:func:`fix_path` over the full string they build; ``target_bin_dir`` and
``manifest_path`` do not, and suffix-only helpers rely on an already
sanitized prefix. The exact strings are relied on by the linker, image and
manifest tooling.
"""

from __future__ import annotations

import os
from typing import Union

from buildpaths.core.models import (
    SYSCFG_YAML_FILENAME,
    BinPlacement,
    PackageKind,
    bin_placement,
    test_target_name,
)
from buildpaths.core.sanitize import filename_from_path, fix_path

PathLike = Union[str, os.PathLike]

BIN_DIRNAME = "bin"
GENERATED_DIRNAME = "generated"
SYSINIT_ARCHIVE_FILENAME = "sysinit.a"
MANIFEST_FILENAME = "manifest.json"
BOOTLOADER_DIRNAME = "bootloader"


def bin_root(project_root: PathLike) -> str:
    return os.fspath(project_root) + "/" + BIN_DIRNAME


def target_bin_dir(project_root: PathLike, target_name: str) -> str:
    return bin_root(project_root) + "/" + filename_from_path(target_name)


def generated_base_dir(project_root: PathLike, target_name: str) -> str:
    return fix_path(
        bin_root(project_root) + "/" + filename_from_path(target_name) + "/" + GENERATED_DIRNAME
    )


def generated_src_dir(project_root: PathLike, target_name: str) -> str:
    return generated_base_dir(project_root, target_name) + "/src"


def generated_include_dir(project_root: PathLike, target_name: str) -> str:
    return generated_base_dir(project_root, target_name) + "/include"


def generated_bin_dir(project_root: PathLike, target_name: str) -> str:
    return generated_base_dir(project_root, target_name) + "/bin"


def sysinit_archive_path(project_root: PathLike, target_name: str) -> str:
    """One sysinit archive per target, whichever package produced it."""
    return generated_bin_dir(project_root, target_name) + "/" + SYSINIT_ARCHIVE_FILENAME


def pkg_syscfg_path(pkg_path: str) -> str:
    return pkg_path + "/" + SYSCFG_YAML_FILENAME


def bin_dir(project_root: PathLike, target_name: str, build_name: str) -> str:
    return fix_path(
        bin_root(project_root) + "/" + filename_from_path(target_name) + "/" + build_name
    )


def file_bin_dir(project_root: PathLike, target_name: str, build_name: str, pkg_name: str) -> str:
    return fix_path(bin_dir(project_root, target_name, build_name) + "/" + pkg_name)


def pkg_bin_dir(
    project_root: PathLike,
    target_name: str,
    build_name: str,
    pkg_name: str,
    pkg_kind: PackageKind,
) -> str:
    """Output directory for a package's objects and archive.

    Generated packages all share the target's generated bin directory, so two
    generated packages of one target cannot be told apart on disk.
    """
    placement = bin_placement(pkg_kind)
    if placement is BinPlacement.GENERATED:
        return generated_bin_dir(project_root, target_name)
    return file_bin_dir(project_root, target_name, build_name, pkg_name)


def archive_path(
    project_root: PathLike,
    target_name: str,
    build_name: str,
    pkg_name: str,
    pkg_kind: PackageKind,
) -> str:
    filename = filename_from_path(pkg_name) + ".a"
    return fix_path(
        pkg_bin_dir(project_root, target_name, build_name, pkg_name, pkg_kind) + "/" + filename
    )


def app_elf_path(project_root: PathLike, target_name: str, build_name: str, app_name: str) -> str:
    return fix_path(
        file_bin_dir(project_root, target_name, build_name, app_name)
        + "/"
        + filename_from_path(app_name)
        + ".elf"
    )


def app_bin_path(project_root: PathLike, target_name: str, build_name: str, app_name: str) -> str:
    return app_elf_path(project_root, target_name, build_name, app_name) + ".bin"


def app_img_path(project_root: PathLike, target_name: str, build_name: str, app_name: str) -> str:
    return fix_path(
        file_bin_dir(project_root, target_name, build_name, app_name)
        + "/"
        + filename_from_path(app_name)
        + ".img"
    )


def test_exe_path(
    project_root: PathLike,
    target_name: str,
    build_name: str,
    pkg_name: str,
    pkg_kind: PackageKind,
) -> str:
    return fix_path(
        pkg_bin_dir(project_root, target_name, build_name, pkg_name, pkg_kind)
        + "/"
        + test_target_name(pkg_name)
        + ".elf"
    )




def manifest_path(project_root: PathLike, target_name: str, build_name: str, app_name: str) -> str:
    # No final fix_path here, unlike the other per-app artifacts.
    return file_bin_dir(project_root, target_name, build_name, app_name) + "/" + MANIFEST_FILENAME


def mfg_bin_dir(project_root: PathLike, mfg_pkg_name: str) -> str:
    return fix_path(bin_root(project_root) + "/" + mfg_pkg_name)


def mfg_boot_dir(project_root: PathLike, mfg_pkg_name: str) -> str:
    return mfg_bin_dir(project_root, mfg_pkg_name) + "/" + BOOTLOADER_DIRNAME

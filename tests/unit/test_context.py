"""Unit tests for BuildContext construction."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from buildpaths.core.context import BuildContext
from buildpaths.core.models import BuildVariant, PackageKind, PackageRef


def test_for_app_binds_app_package(target: PackageRef) -> None:
    app = PackageRef("apps/blinky", PackageKind.APP)
    ctx = BuildContext.for_app(project_root="/proj", target=target, app=app)
    assert ctx.build_name == "app"
    assert ctx.app_package == app
    assert ctx.test_package is None
    assert ctx.target_name == "boards/nrf52"


def test_for_loader_binds_loader_as_app_package(target: PackageRef) -> None:
    loader = PackageRef("boot/mcuboot", PackageKind.APP)
    ctx = BuildContext.for_loader(project_root="/proj", target=target, loader=loader)
    assert ctx.build_name == "loader"
    assert ctx.app_package == loader


def test_for_test_derives_build_name(target: PackageRef) -> None:
    pkg = PackageRef("sys/log/full/selftest")
    ctx = BuildContext.for_test(project_root="/proj", target=target, test=pkg)
    assert ctx.build_name == "sys_log_full_selftest"
    assert ctx.test_package == pkg
    assert ctx.app_package is None


def test_for_variant_accepts_variant_values(target: PackageRef) -> None:
    ctx = BuildContext.for_variant(
        "loader", project_root="/proj", target=target, package=PackageRef("boot/mcuboot")
    )
    assert ctx.build_name == "loader"


def test_project_root_is_normalized_to_str(target: PackageRef) -> None:
    ctx = BuildContext.for_app(project_root=Path("/proj"), target=target, app=PackageRef("apps/blinky"))
    assert ctx.project_root == "/proj"


def test_context_is_immutable(blinky_context: BuildContext) -> None:
    with pytest.raises(FrozenInstanceError):
        blinky_context.build_name = "loader"  # type: ignore[misc]


def test_equal_coordinates_give_equal_contexts(target: PackageRef) -> None:
    app = PackageRef("apps/blinky", PackageKind.APP)
    first = BuildContext.for_variant(BuildVariant.APP, project_root="/proj", target=target, package=app)
    second = BuildContext.for_variant(BuildVariant.APP, project_root="/proj", target=target, package=app)
    assert first == second
    assert hash(first) == hash(second)


def test_construction_logs_coordinates(target: PackageRef, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="buildpaths.core.context"):
        BuildContext.for_app(project_root="/proj", target=target, app=PackageRef("apps/blinky"))
    assert "target=boards/nrf52 build=app app=apps/blinky" in caplog.text

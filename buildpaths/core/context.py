"""Immutable coordinates of one build invocation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from buildpaths.core.models import (
    BUILD_NAME_APP,
    BUILD_NAME_LOADER,
    BuildVariant,
    PackageRef,
    test_target_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildContext:
    """Target, build name and bound app/test packages for a single build.

    Created once by the build orchestrator; accessors in
    :mod:`buildpaths.core.session` only read it.
    """

    project_root: str
    target: PackageRef
    build_name: str
    app_package: Optional[PackageRef] = None
    test_package: Optional[PackageRef] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_root", os.fspath(self.project_root))

    @property
    def target_name(self) -> str:
        return self.target.name

    @classmethod
    def for_variant(
        cls,
        variant: BuildVariant,
        *,
        project_root: str,
        target: PackageRef,
        package: PackageRef,
    ) -> "BuildContext":
        """Bind ``package`` as the app (app/loader variants) or test package."""
        variant = BuildVariant(variant)
        if variant is BuildVariant.TEST:
            ctx = cls(
                project_root=project_root,
                target=target,
                build_name=test_target_name(package.name),
                test_package=package,
            )
        else:
            build_name = BUILD_NAME_APP if variant is BuildVariant.APP else BUILD_NAME_LOADER
            ctx = cls(
                project_root=project_root,
                target=target,
                build_name=build_name,
                app_package=package,
            )
        logger.debug(
            "Build context: root=%s target=%s build=%s app=%s test=%s",
            ctx.project_root,
            ctx.target_name,
            ctx.build_name,
            ctx.app_package.name if ctx.app_package else None,
            ctx.test_package.name if ctx.test_package else None,
        )
        return ctx

    @classmethod
    def for_app(cls, *, project_root: str, target: PackageRef, app: PackageRef) -> "BuildContext":
        return cls.for_variant(BuildVariant.APP, project_root=project_root, target=target, package=app)

    @classmethod
    def for_loader(
        cls, *, project_root: str, target: PackageRef, loader: PackageRef
    ) -> "BuildContext":
        return cls.for_variant(
            BuildVariant.LOADER, project_root=project_root, target=target, package=loader
        )

    @classmethod
    def for_test(cls, *, project_root: str, target: PackageRef, test: PackageRef) -> "BuildContext":
        return cls.for_variant(BuildVariant.TEST, project_root=project_root, target=target, package=test)

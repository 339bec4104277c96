"""Build coordinates: package kinds, build variants and package references."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BUILD_NAME_APP = "app"
BUILD_NAME_LOADER = "loader"

SYSCFG_YAML_FILENAME = "syscfg.yml"


class PackageKind(str, Enum):
    """Package kind tags reported by the package-metadata loader."""

    APP = "app"
    BSP = "bsp"
    COMPILER = "compiler"
    CONFIG = "config"
    GENERATED = "generated"
    LIB = "lib"
    MFG = "mfg"
    SDK = "sdk"
    TARGET = "target"
    TRANSIENT = "transient"
    UNITTEST = "unittest"


class BuildVariant(str, Enum):
    """Artifact subtrees a target can be built into."""

    APP = "app"
    LOADER = "loader"
    TEST = "test"


class BinPlacement(str, Enum):
    """Where a package's binaries land within a target's bin tree."""

    GENERATED = "generated"
    PACKAGE = "package"


# Every PackageKind must appear here; checked below at import time.
BIN_PLACEMENT: dict[PackageKind, BinPlacement] = {
    PackageKind.APP: BinPlacement.PACKAGE,
    PackageKind.BSP: BinPlacement.PACKAGE,
    PackageKind.COMPILER: BinPlacement.PACKAGE,
    PackageKind.CONFIG: BinPlacement.PACKAGE,
    PackageKind.GENERATED: BinPlacement.GENERATED,
    PackageKind.LIB: BinPlacement.PACKAGE,
    PackageKind.MFG: BinPlacement.PACKAGE,
    PackageKind.SDK: BinPlacement.PACKAGE,
    PackageKind.TARGET: BinPlacement.PACKAGE,
    PackageKind.TRANSIENT: BinPlacement.PACKAGE,
    PackageKind.UNITTEST: BinPlacement.PACKAGE,
}

_unplaced = [kind.value for kind in PackageKind if kind not in BIN_PLACEMENT]
if _unplaced:
    raise RuntimeError(f"Package kinds without a bin placement: {', '.join(_unplaced)}")
del _unplaced


def bin_placement(kind: PackageKind) -> BinPlacement:
    return BIN_PLACEMENT[PackageKind(kind)]


def parse_package_kind(value: str) -> PackageKind:
    """Parse a package kind tag, rejecting unknown kinds."""
    try:
        return PackageKind(value)
    except ValueError:
        allowed = ", ".join(kind.value for kind in PackageKind)
        raise ValueError(f"Unknown package kind: {value} (expected one of: {allowed})") from None


def test_target_name(pkg_name: str) -> str:
    """Stem used for a package's test executable and test build name."""
    return pkg_name.replace("/", "_")


@dataclass(frozen=True)
class PackageRef:
    """A package as seen by the path layer: canonical full name plus kind."""

    name: str
    kind: PackageKind = PackageKind.LIB

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PackageKind(self.kind))

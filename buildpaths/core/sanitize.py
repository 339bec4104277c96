"""Filesystem-safe path segments."""

from __future__ import annotations

_STRIPPED = "@"
_UNDERSCORED = (" ", "\t", "\n")


def fix_path(value: str) -> str:
    """Remove odd characters from a path.

    Strips every ``@`` and turns spaces, tabs and newlines into ``_``. Nothing
    else is touched, so the result is stable under repeated application.
    """
    value = value.replace(_STRIPPED, "")
    for ch in _UNDERSCORED:
        value = value.replace(ch, "_")
    return value


def filename_from_path(value: str) -> str:
    """Return the final ``/``-separated segment of a hierarchical name."""
    return value.rsplit("/", 1)[-1]

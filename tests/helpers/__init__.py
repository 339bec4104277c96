"""Test helper utilities."""

from .contexts import PROJECT_ROOT, TARGET, app_context, loader_context, selftest_context

__all__ = [
    "PROJECT_ROOT",
    "TARGET",
    "app_context",
    "loader_context",
    "selftest_context",
]

"""
Short-circuiting searches over candidate extractors and parameter names.
"""

from __future__ import annotations

__all__ = ["first_extracted", "first_param"]

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def first_extracted(
    candidates: Iterable[Callable[[T], str | None]],
    context: T,
) -> str | None:
    """Return the first truthy result of calling each candidate on ``context``.

    Candidates after the first success are never invoked.
    """
    for candidate in candidates:
        if result := candidate(context):
            return result
    return None


def first_param(
    keys: Iterable[str],
    getter: Callable[[str], str | None],
) -> str | None:
    """Return the first truthy ``getter(key)`` over ``keys``, in order."""
    for key in keys:
        if value := getter(key):
            return value
    return None

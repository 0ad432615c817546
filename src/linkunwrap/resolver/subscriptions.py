"""
Derive the host-side subscription filter from the site registry.
"""

from __future__ import annotations

__all__ = ["SUBSCRIPTIONS", "build_subscriptions"]

from collections.abc import Mapping

from .registry import SITES


def build_subscriptions(
    registry: Mapping[str, Mapping[str, object]] = SITES,
) -> list[str]:
    """Build one ``*://<host><path>*`` match pattern per registry entry.

    Args:
        registry: Host -> path mapping, iterated in insertion order.

    Returns:
        Match patterns in registry order.
    """
    return [
        f"*://{host}{path}*" for host, paths in registry.items() for path in paths
    ]


SUBSCRIPTIONS: tuple[str, ...] = tuple(build_subscriptions())

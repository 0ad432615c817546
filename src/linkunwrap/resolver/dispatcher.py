"""
Resolve an intercepted request to the destination of a known redirector.
"""

from __future__ import annotations

__all__ = ["Resolver", "resolve", "resolve_url"]

import logging
from collections.abc import Mapping
from typing import Any

from linkunwrap.schemas import RedirectResult, RequestDetails, ResolverConfig

from .hosts import normalize_host
from .registry import RULES, SITES, Rule
from .search import first_extracted
from .subscriptions import SUBSCRIPTIONS, build_subscriptions
from .url import parse_url

logger = logging.getLogger(__name__)


def _request_url(request: Mapping[str, Any] | Any) -> str:
    if isinstance(request, Mapping):
        return request["url"]
    return request.url


def _unwrap(url: str, rules: Mapping[str, tuple[Rule, ...]]) -> str | None:
    parsed = parse_url(url)
    host = normalize_host(parsed.host)

    site = rules.get(host)
    if not site:
        return None

    target = first_extracted(site, parsed)
    if target:
        logger.debug("Unwrapped %s -> %s", url, target)
    else:
        logger.debug("No destination found in %s (site %s)", url, host)
    return target


def resolve(request: RequestDetails | Any) -> RedirectResult | None:
    """Resolve an intercepted request against the full site registry.

    Args:
        request: Request descriptor: a mapping with a ``"url"`` key, or any
            object with a ``url`` attribute.

    Returns:
        ``{"redirectUrl": ...}`` when a registered redirector carried a
        destination, otherwise ``None``.

    Raises:
        InvalidURLError: If the request URL cannot be parsed.
    """
    target = _unwrap(_request_url(request), RULES)
    return {"redirectUrl": target} if target else None


def resolve_url(url: str) -> str | None:
    """Return the destination embedded in ``url``, or ``None``."""
    return _unwrap(url, RULES)


class Resolver:
    """Registry front-end that honours a :class:`ResolverConfig`.

    Hosts listed in ``disabled_hosts`` are dropped from both resolution
    and the subscription list.
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or ResolverConfig()
        self._disabled = self._disabled_keys(self._config.disabled_hosts)
        if self._disabled:
            self._rules: Mapping[str, tuple[Rule, ...]] = {
                host: rules
                for host, rules in RULES.items()
                if host not in self._disabled
            }
        else:
            self._rules = RULES

    @property
    def disabled(self) -> frozenset[str]:
        """Registry hosts skipped by this resolver."""
        return self._disabled

    def resolve(self, request: RequestDetails | Any) -> RedirectResult | None:
        """Same as :func:`resolve`, restricted to enabled hosts."""
        target = _unwrap(_request_url(request), self._rules)
        return {"redirectUrl": target} if target else None

    def subscriptions(self) -> list[str]:
        """Match patterns for the enabled registry hosts."""
        if not self._disabled:
            return list(SUBSCRIPTIONS)
        return build_subscriptions(
            {host: paths for host, paths in SITES.items() if host in self._rules}
        )

    @staticmethod
    def _disabled_keys(hosts: tuple[str, ...]) -> frozenset[str]:
        keys = set()
        for host in hosts:
            key = normalize_host(host.strip().lower())
            if key not in RULES:
                logger.warning("Ignoring unknown disabled host: %s", host)
                continue
            keys.add(key)
        return frozenset(keys)

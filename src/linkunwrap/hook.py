"""
Glue between the resolver and a host's request-interception API.

The host is expected to expose an event object in the style of
``webRequest.onBeforeRequest``: ``add_listener(callback, filter, extra)``,
where ``filter`` holds the ``urls`` match patterns to deliver and the
callback may return ``{"redirectUrl": ...}`` to replace the request.
"""

from __future__ import annotations

__all__ = ["RequestEvent", "make_listener", "install"]

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from linkunwrap.resolver import InvalidURLError, Resolver
from linkunwrap.schemas import RedirectResult

logger = logging.getLogger(__name__)

Listener = Callable[[Mapping[str, Any]], RedirectResult | None]


class RequestEvent(Protocol):
    def add_listener(
        self,
        callback: Listener,
        filter: dict[str, list[str]],
        extra_info_spec: list[str],
    ) -> None: ...


def make_listener(resolver: Resolver | None = None) -> Listener:
    """Wrap a resolver into a blocking request listener.

    A request whose URL cannot be parsed is logged and left untouched.
    """
    resolver = resolver or Resolver()

    def on_before_request(details: Mapping[str, Any]) -> RedirectResult | None:
        try:
            return resolver.resolve(details)
        except InvalidURLError as e:
            logger.warning("Skipping request with malformed URL: %s", e)
            return None

    return on_before_request


def install(event: RequestEvent, resolver: Resolver | None = None) -> Listener:
    """Register a blocking listener for every registered redirector.

    Args:
        event: Host event to subscribe to.
        resolver: Resolver to use; a default one covers the whole registry.

    Returns:
        The registered listener.
    """
    resolver = resolver or Resolver()
    listener = make_listener(resolver)
    urls = resolver.subscriptions()
    event.add_listener(listener, {"urls": urls}, ["blocking"])
    logger.info("Listening for %d redirector patterns", len(urls))
    return listener

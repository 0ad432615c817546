"""
Parsed view of a request URL, shaped after the WHATWG ``URL`` object.
"""

from __future__ import annotations

__all__ = ["ParsedURL", "parse_url"]

import re
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlsplit

from .errors import InvalidURLError

_DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

_SINGLE_DOT = frozenset({".", "%2e"})
_DOUBLE_DOT = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})
_HEAD_RE = re.compile(r"[^?#]*")


@dataclass(frozen=True)
class ParsedURL:
    """Structured URL components used by extractors.

    Attributes:
        href: The original URL string.
        host: Lowercased hostname, followed by ``:port`` for non-default ports.
        pathname: Path component, ``"/"`` when empty. For http(s), ws(s) and
            ftp URLs, backslashes count as slashes and dot segments are
            collapsed.
        query: Raw query string without the leading ``?``.
        params: Decoded ``(name, value)`` pairs in query order.
    """

    href: str
    host: str
    pathname: str
    query: str = ""
    params: tuple[tuple[str, str], ...] = field(default=(), repr=False)

    def search_param(self, key: str) -> str | None:
        """Return the first value of the query parameter ``key``, if any."""
        for name, value in self.params:
            if name == key:
                return value
        return None


def _remove_dot_segments(path: str) -> str:
    """Collapse ``.`` and ``..`` segments of a special URL path."""
    segments = path.split("/")[1:]
    output: list[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if output:
                output.pop()
            if last:
                output.append("")
        elif lowered in _SINGLE_DOT:
            if last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def parse_url(url: str) -> ParsedURL:
    """Parse an absolute URL string.

    Args:
        url: Absolute URL, e.g. the ``url`` of an intercepted request.

    Returns:
        The parsed components.

    Raises:
        InvalidURLError: If the URL has no scheme, lacks the host its
            scheme requires, or carries an invalid port or IPv6 literal.
    """
    raw = url.strip()
    special = raw.partition(":")[0].lower() in _DEFAULT_PORTS
    if special:
        # Backslashes act as slashes before the query of special URLs.
        head = _HEAD_RE.match(raw).group()
        raw = head.replace("\\", "/") + raw[len(head):]

    try:
        parts = urlsplit(raw)
        hostname = parts.hostname
        port = parts.port
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e

    if not parts.scheme:
        raise InvalidURLError(url, "missing scheme")
    if not hostname:
        if parts.scheme in _DEFAULT_PORTS:
            raise InvalidURLError(url, "missing host")
        hostname = ""

    pathname = parts.path
    if special:
        pathname = _remove_dot_segments(pathname)

    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"

    return ParsedURL(
        href=url,
        host=host,
        pathname=pathname or "/",
        query=parts.query,
        params=tuple(parse_qsl(parts.query, keep_blank_values=True)),
    )

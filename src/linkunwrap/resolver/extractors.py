"""
Strategies that pull the embedded destination out of a redirector URL.

Every extractor exposes a single ``extract`` operation. Compound
strategies wrap another extractor and post-process its result.
"""

from __future__ import annotations

__all__ = [
    "Extractor",
    "SearchParam",
    "FirstParam",
    "Decoded",
    "StripFromColon",
    "LastPathSegment",
]

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import unquote

from .search import first_param
from .url import ParsedURL


class Extractor(Protocol):
    def extract(self, url: ParsedURL) -> str | None:
        """Return the destination URL, or a falsy value when absent."""
        ...


@dataclass(frozen=True)
class SearchParam:
    """Value of one query parameter, decoded once by query parsing."""

    key: str

    def extract(self, url: ParsedURL) -> str | None:
        return url.search_param(self.key)


@dataclass(frozen=True)
class FirstParam:
    """First non-empty value among several query parameter names."""

    keys: tuple[str, ...]

    def extract(self, url: ParsedURL) -> str | None:
        return first_param(self.keys, url.search_param)


@dataclass(frozen=True)
class Decoded:
    """Percent-decode the inner result exactly once.

    Escapes that do not form valid UTF-8 yield no destination.
    """

    inner: Extractor

    def extract(self, url: ParsedURL) -> str | None:
        try:
            return unquote(self.inner.extract(url) or "", errors="strict")
        except UnicodeDecodeError:
            return None


@dataclass(frozen=True)
class StripFromColon:
    """Drop everything from the last ``:`` of the inner result.

    A value without a colon strips down to the empty string.
    """

    inner: Extractor

    def extract(self, url: ParsedURL) -> str | None:
        value = self.inner.extract(url) or ""
        return value[: max(value.rfind(":"), 0)]


@dataclass(frozen=True)
class LastPathSegment:
    """The URL path after its last ``/``."""

    def extract(self, url: ParsedURL) -> str | None:
        path = url.pathname
        return path[path.rfind("/") + 1 :]

"""
Static registry of known redirectors.

``SITES`` maps a registry host (exact, or ``*.``-prefixed for folded
domains) to an ordered mapping of path pattern -> extractor. ``RULES``
is the same data with every path compiled into a matcher.
"""

from __future__ import annotations

__all__ = ["Rule", "SITES", "RULES"]

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .extractors import (
    Decoded,
    Extractor,
    FirstParam,
    LastPathSegment,
    SearchParam,
    StripFromColon,
)
from .hosts import FOLD_DOMAINS, normalize_host
from .patterns import PathMatcher, compile_match_pattern
from .url import ParsedURL

SiteMap = Mapping[str, Mapping[str, Extractor]]


@dataclass(frozen=True)
class Rule:
    """A compiled (path, extractor) pair of one registry host."""

    path: str
    matcher: PathMatcher
    extractor: Extractor

    def __call__(self, url: ParsedURL) -> str | None:
        return self.matcher(url.pathname) and self.extractor.extract(url) or None


_GOOGLE_PATHS: dict[str, Extractor] = {
    "/imgres": FirstParam(("imgurl", "imgrefurl")),
    "/url": FirstParam(("q", "url")),
}

_SITES: dict[str, dict[str, Extractor]] = {
    # https://wow.curseforge.com/linkout?remoteUrl=http%253a%252f%252fi.imgur.com%252f1AjSgEH.png
    "*.curseforge.com": {
        "/linkout": SearchParam("remoteUrl"),
    },
    "*.digidip.net": {
        "/visit": SearchParam("url"),
    },
    "disq.us": {
        "/url": StripFromColon(SearchParam("url")),
    },
    # https://console.ebsta.com/linktracking/track.aspx?trackid=...&linkuri=https%3A%2F%2Fen-jp.wantedly.com%2Fprojects%2F328561
    "console.ebsta.com": {
        "/linktracking/track.aspx": SearchParam("linkuri"),
    },
    "exit.sc": {
        "/": SearchParam("url"),
    },
    "l.facebook.com": {
        "/l.php": SearchParam("u"),
    },
    # https://gate.sc/?url=http%3A%2F%2Ffanlink.to%2FPartial7&token=10fd54-1-1565068249069
    "gate.sc": {
        "/": SearchParam("url"),
    },
    "www.google.co.jp": _GOOGLE_PATHS,
    "news.url.google.com": {
        "/url": SearchParam("url"),
    },
    "plus.url.google.com": {
        "/url": SearchParam("url"),
    },
    "www.google.com": _GOOGLE_PATHS,
    "l.instagram.com": {
        "/": SearchParam("u"),
    },
    "www.javlibrary.com": {
        "/en/redirect.php": SearchParam("url"),
    },
    "l.messenger.com": {
        "/l.php": SearchParam("u"),
    },
    # https://outgoing.prod.mozaws.net/v1/08aa30.../https%3A//developer.mozilla.org/...
    "outgoing.prod.mozaws.net": {
        "/v1/": Decoded(LastPathSegment()),
    },
    # https://gcc01.safelinks.protection.outlook.com/?url=https%3A%2F%2Fwww.metro.tokyo.lg.jp%2Fenglish%2Findex.html
    "gcc01.safelinks.protection.outlook.com": {
        "/": SearchParam("url"),
    },
    "slack-redir.net": {
        "/link": SearchParam("url"),
    },
    "steamcommunity.com": {
        "/linkfilter/": SearchParam("url"),
    },
    "twitter.com": {
        "/i/redirect": SearchParam("url"),
    },
    "t.umblr.com": {
        "/redirect": SearchParam("z"),
    },
    "vk.com": {
        "/away.php": SearchParam("to"),
    },
    "workable.com": {
        "/nr": SearchParam("l"),
    },
    "www.youtube.com": {
        "/redirect": SearchParam("q"),
    },
}


def _freeze(sites: dict[str, dict[str, Extractor]]) -> SiteMap:
    canonical: dict[str, str] = {}
    for host in sites:
        key = normalize_host(host)
        if host.startswith("*.") and host[2:] not in FOLD_DOMAINS:
            raise ValueError(f"Wildcard host {host!r} is not a folded domain")
        if key in canonical:
            raise ValueError(f"Hosts {canonical[key]!r} and {host!r} collide")
        canonical[key] = host
    return MappingProxyType(
        {host: MappingProxyType(dict(paths)) for host, paths in sites.items()}
    )


def _compile(sites: SiteMap) -> Mapping[str, tuple[Rule, ...]]:
    return MappingProxyType(
        {
            host: tuple(
                Rule(path, compile_match_pattern(path), extractor)
                for path, extractor in paths.items()
            )
            for host, paths in sites.items()
        }
    )


SITES: SiteMap = _freeze(_SITES)
RULES: Mapping[str, tuple[Rule, ...]] = _compile(SITES)

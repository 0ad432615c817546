"""
Redirect-resolution engine: registry, host folding and dispatch.
"""

__all__ = [
    "FOLD_DOMAINS",
    "RULES",
    "SITES",
    "SUBSCRIPTIONS",
    "InvalidURLError",
    "ParsedURL",
    "ResolveError",
    "Resolver",
    "Rule",
    "build_subscriptions",
    "compile_match_pattern",
    "normalize_host",
    "parse_url",
    "resolve",
    "resolve_url",
]

from .dispatcher import Resolver, resolve, resolve_url
from .errors import InvalidURLError, ResolveError
from .hosts import FOLD_DOMAINS, normalize_host
from .patterns import compile_match_pattern
from .registry import RULES, SITES, Rule
from .subscriptions import SUBSCRIPTIONS, build_subscriptions
from .url import ParsedURL, parse_url

"""
Compile simplified match patterns into path predicates.

A match pattern knows two tokens: ``.`` (a literal dot) and ``*`` (any
sequence). Only the first occurrence of each is translated; the registered
path patterns never use more than one of either.
"""

from __future__ import annotations

__all__ = ["PathMatcher", "compile_match_pattern", "match_pattern_to_regex"]

import re
from collections.abc import Callable
from functools import lru_cache

PathMatcher = Callable[[str], bool]


def match_pattern_to_regex(pattern: str) -> str:
    """Translate a match pattern into a start-anchored regular expression.

    Args:
        pattern: Match pattern such as ``"/l.php"`` or ``"/v1/*"``.

    Returns:
        Regex source, e.g. ``"^/l\\.php"``.
    """
    return "^" + pattern.replace(".", "\\.", 1).replace("*", ".*", 1)


@lru_cache(maxsize=256)
def compile_match_pattern(pattern: str) -> PathMatcher:
    """Build a prefix predicate for the given match pattern.

    Args:
        pattern: Match pattern for a URL path.

    Returns:
        A callable returning ``True`` when a path starts with a match.
    """
    regex = re.compile(match_pattern_to_regex(pattern))

    def matcher(path: str) -> bool:
        return regex.match(path) is not None

    return matcher

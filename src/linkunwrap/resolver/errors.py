"""
Errors raised while resolving a request URL.

A URL without a matching rule is not an error; only input that cannot be
parsed is.
"""


class ResolveError(Exception):
    """Generic resolution failure."""


class InvalidURLError(ResolveError, ValueError):
    """Raised when a request URL cannot be parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason

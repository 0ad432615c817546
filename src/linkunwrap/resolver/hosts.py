"""
Fold subdomains of selected base domains onto wildcard registry keys.
"""

from __future__ import annotations

__all__ = ["FOLD_DOMAINS", "normalize_host"]

# Any subdomain of these is looked up as "*.<domain>".
FOLD_DOMAINS: tuple[str, ...] = (
    "curseforge.com",
    "digidip.net",
)


def normalize_host(host: str, domains: tuple[str, ...] = FOLD_DOMAINS) -> str:
    """Map a request host to its registry key.

    The first domain in ``domains`` that ``host`` is a proper subdomain of
    wins. The bare domain itself is left alone, as are hosts that merely
    end with the same characters (``evilcurseforge.com``).

    Args:
        host: Host of the request URL.
        domains: Base domains to fold, checked in order.

    Returns:
        ``"*.<domain>"`` for a folded host, otherwise ``host`` unchanged.
    """
    for domain in domains:
        if host.endswith("." + domain):
            return f"*.{domain}"
    return host

"""
Data contracts and type definitions.
"""

__all__ = [
    "LogConfig",
    "ResolverConfig",
    "RedirectResult",
    "RequestDetails",
]

from .config import LogConfig, ResolverConfig
from .redirect import RedirectResult, RequestDetails

"""
Request and result shapes exchanged with the host interception mechanism.
"""

from typing import TypedDict


class RequestDetails(TypedDict):
    """Request descriptor handed over by the host before a navigation.

    Only ``url`` is required; hosts usually send more fields
    (``requestId``, ``method``, ``type``...), which are ignored.
    """

    url: str


class RedirectResult(TypedDict):
    """Redirect decision returned to the host.

    Attributes:
        redirectUrl: Destination the intercepted request should go to.
    """

    redirectUrl: str

"""Windows Push Notification Services."""

from __future__ import annotations

from .dispatcher import WNSDispatcher
from .parser import WNSResponseParser
from .payload import WNSPayload, WNSRawPayload, WNSToastPayload
from .response import WNSResponse

__all__ = [
    "WNSDispatcher",
    "WNSPayload",
    "WNSRawPayload",
    "WNSResponse",
    "WNSResponseParser",
    "WNSToastPayload",
]

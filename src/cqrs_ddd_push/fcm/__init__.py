"""Firebase Cloud Messaging (legacy HTTP API)."""

from __future__ import annotations

from .dispatcher import FCMDispatcher
from .parser import FCMBatchResponseParser
from .payload import FCMPayload
from .response import FCMBatchResponse, FCMResponse

__all__ = [
    "FCMBatchResponse",
    "FCMBatchResponseParser",
    "FCMDispatcher",
    "FCMPayload",
    "FCMResponse",
]

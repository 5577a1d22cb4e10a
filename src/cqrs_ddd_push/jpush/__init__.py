"""JPush push and report APIs."""

from __future__ import annotations

from .dispatcher import JPushDispatcher
from .parser import JPushBatchResponseParser, JPushReportParser
from .payload import (
    JPushMessagePayload,
    JPushNotification3rdPayload,
    JPushNotificationPayload,
    JPushPayload,
)
from .response import JPushResponse

__all__ = [
    "JPushBatchResponseParser",
    "JPushDispatcher",
    "JPushMessagePayload",
    "JPushNotification3rdPayload",
    "JPushNotificationPayload",
    "JPushPayload",
    "JPushReportParser",
    "JPushResponse",
]

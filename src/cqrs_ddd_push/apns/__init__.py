"""Apple Push Notification service."""

from __future__ import annotations

from .models import ApnsErrorRecord, ApnsRawResponse
from .parser import APNSResponseParser
from .payload import APNSPayload
from .reasons import DEFAULT_CODE_STATUSES, DEFAULT_REASON_STATUSES
from .response import APNSResponse

__all__ = [
    "APNSPayload",
    "APNSResponse",
    "APNSResponseParser",
    "ApnsErrorRecord",
    "ApnsRawResponse",
    "DEFAULT_CODE_STATUSES",
    "DEFAULT_REASON_STATUSES",
]

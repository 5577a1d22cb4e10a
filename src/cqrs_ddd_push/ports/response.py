"""Notification response port."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..status import PushNotificationStatus


@runtime_checkable
class INotificationResponse(Protocol):
    """What callers query after a send: the status of one endpoint."""

    def get_status(self, endpoint: str) -> PushNotificationStatus:
        """Return the delivery status of ``endpoint`` (UNKNOWN if not part of the send)."""
        ...

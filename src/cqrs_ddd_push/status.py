"""Unified delivery status shared by every provider."""

from __future__ import annotations

from enum import Enum


class PushNotificationStatus(Enum):
    """Delivery outcome for one endpoint, declared from best to worst."""

    SUCCESS = "success"
    UNKNOWN = "unknown"
    TEMPORARY_ERROR = "temporary_error"
    CLIENT_ERROR = "client_error"
    ERROR = "error"
    INVALID_ENDPOINT = "invalid_endpoint"

    @property
    def severity(self) -> int:
        """Position in the best-to-worst ordering (0 is SUCCESS)."""
        return _SEVERITY[self]

    @classmethod
    def worst(cls, *statuses: PushNotificationStatus) -> PushNotificationStatus:
        """Return the most severe of the given statuses (UNKNOWN when none given)."""
        if not statuses:
            return cls.UNKNOWN
        return max(statuses, key=lambda status: status.severity)


_SEVERITY: dict[PushNotificationStatus, int] = {
    status: position for position, status in enumerate(PushNotificationStatus)
}

"""Exception hierarchy for push notification delivery."""

from __future__ import annotations


class PushNotificationError(Exception):
    """Base exception for push notification infrastructure failures."""


class MalformedResponseError(PushNotificationError):
    """Raised when a provider response does not have the shape its parser expects.

    This signals a provider/parser contract mismatch, never an ordinary
    delivery failure. Delivery failures are reported as statuses.
    """

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"Malformed {provider} response: {reason}")


class PayloadError(PushNotificationError, ValueError):
    """Raised when a payload builder receives a value the provider would reject."""

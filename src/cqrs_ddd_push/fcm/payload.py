"""FCM payload builder."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from ..exceptions import PayloadError

MAX_TIME_TO_LIVE = 2_419_200  # four weeks


class FCMPayload:
    """Builds the JSON body of a legacy FCM multicast request."""

    def __init__(self) -> None:
        self.elements: dict[str, Any] = {}

    def set_registration_ids(self, registration_ids: Sequence[str]) -> FCMPayload:
        self.elements["registration_ids"] = list(registration_ids)
        return self

    def set_collapse_key(self, key: str) -> FCMPayload:
        self.elements["collapse_key"] = key
        return self

    def set_data(self, data: dict[str, Any]) -> FCMPayload:
        self.elements["data"] = data
        return self

    def set_notification(self, title: str, body: str | None = None) -> FCMPayload:
        notification = {"title": title}
        if body is not None:
            notification["body"] = body
        self.elements["notification"] = notification
        return self

    def set_time_to_live(self, ttl: int) -> FCMPayload:
        """Seconds FCM keeps the message for an offline device."""
        if not 0 <= ttl <= MAX_TIME_TO_LIVE:
            raise PayloadError(f"FCM time_to_live must be within 0..{MAX_TIME_TO_LIVE}, got {ttl}")
        self.elements["time_to_live"] = ttl
        return self

    def set_priority(self, priority: str) -> FCMPayload:
        if priority not in ("normal", "high"):
            raise PayloadError(f"FCM priority must be 'normal' or 'high', got {priority!r}")
        self.elements["priority"] = priority
        return self

    def get_payload(self) -> str:
        return json.dumps(self.elements, separators=(",", ":"))

    def for_batch(self, registration_ids: Sequence[str]) -> str:
        """Payload of this notification addressed to one batch of endpoints."""
        elements = dict(self.elements)
        elements["registration_ids"] = list(registration_ids)
        return json.dumps(elements, separators=(",", ":"))

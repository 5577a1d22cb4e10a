"""APNS payload builder."""

from __future__ import annotations

import json
from typing import Any

from ..exceptions import PayloadError


class APNSPayload:
    """
    Builds the JSON body of an APNS notification.

    Standard fields go into the ``aps`` dictionary; custom data is merged at
    the top level next to it.
    """

    def __init__(self) -> None:
        self.elements: dict[str, Any] = {}

    def set_alert(self, alert: str | dict[str, str]) -> APNSPayload:
        self.elements["alert"] = alert
        return self

    def set_badge(self, badge: int) -> APNSPayload:
        if badge < 0:
            raise PayloadError(f"APNS badge must be >= 0, got {badge}")
        self.elements["badge"] = badge
        return self

    def set_sound(self, sound: str) -> APNSPayload:
        self.elements["sound"] = sound
        return self

    def set_category(self, category: str) -> APNSPayload:
        self.elements["category"] = category
        return self

    def set_thread_id(self, thread_id: str) -> APNSPayload:
        self.elements["thread-id"] = thread_id
        return self

    def set_content_available(self, available: bool) -> APNSPayload:
        if available:
            self.elements["content-available"] = 1
        else:
            self.elements.pop("content-available", None)
        return self

    def set_custom_data(self, key: str, value: Any) -> APNSPayload:
        if key == "aps":
            raise PayloadError("'aps' is reserved for the APNS dictionary")
        self.elements.setdefault("custom_data", {})[key] = value
        return self

    def get_payload(self) -> str:
        aps = {key: value for key, value in self.elements.items() if key != "custom_data"}
        payload: dict[str, Any] = {"aps": aps}
        payload.update(self.elements.get("custom_data", {}))
        return json.dumps(payload, separators=(",", ":"))

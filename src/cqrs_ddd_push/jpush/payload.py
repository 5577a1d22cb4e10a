"""JPush payload builders."""

from __future__ import annotations

import copy
import json
from collections.abc import Sequence
from typing import Any

from ..exceptions import PayloadError


class JPushPayload:
    """
    Shared JPush push body.

    Setters fill every section a variant may send; ``get_payload`` keeps
    only the sections that variant uses.
    """

    sections: tuple[str, ...] = ("notification",)

    def __init__(self) -> None:
        self.elements: dict[str, Any] = {
            "platform": "all",
            "audience": {},
            "notification": {"android": {}, "ios": {}},
            "notification_3rd": {},
            "message": {},
            "options": {},
        }

    def set_title(self, title: str) -> JPushPayload:
        self.elements["notification"]["android"]["title"] = title
        self.elements["notification_3rd"]["title"] = title
        self.elements["message"]["title"] = title
        return self

    def set_body(self, body: str) -> JPushPayload:
        self.elements["notification"]["alert"] = body
        self.elements["notification_3rd"]["content"] = body
        self.elements["message"]["msg_content"] = body
        return self

    def set_data(self, data: dict[str, Any]) -> JPushPayload:
        self.elements["notification"]["android"]["extras"] = data
        self.elements["notification"]["ios"]["extras"] = data
        self.elements["notification_3rd"]["extras"] = data
        self.elements["message"]["extras"] = data
        return self

    def set_apns_production(self, production: bool) -> JPushPayload:
        self.elements["options"]["apns_production"] = production
        return self

    def set_time_to_live(self, ttl: int) -> JPushPayload:
        if ttl < 0:
            raise PayloadError(f"JPush time_to_live must be >= 0, got {ttl}")
        self.elements["options"]["time_to_live"] = ttl
        return self

    def get_elements(self) -> dict[str, Any]:
        elements = copy.deepcopy(self.elements)
        for section in ("notification", "notification_3rd", "message"):
            if section not in self.sections:
                del elements[section]
        if not elements["options"]:
            del elements["options"]
        return elements

    def get_payload(self) -> str:
        return json.dumps(self.get_elements(), separators=(",", ":"))

    def for_endpoints(self, registration_ids: Sequence[str]) -> str:
        """Payload addressed to the given registration ids."""
        elements = self.get_elements()
        elements["audience"] = {"registration_id": list(registration_ids)}
        return json.dumps(elements, separators=(",", ":"))


class JPushNotificationPayload(JPushPayload):
    """Regular notification shown by the JPush SDK."""


class JPushMessagePayload(JPushPayload):
    """In-app custom message, not displayed by the system."""

    sections = ("message",)


class JPushNotification3rdPayload(JPushPayload):
    """Notification routed through the vendor channels (``notification_3rd``)."""

    sections = ("notification_3rd",)

    def set_sound(self, sound: str) -> JPushNotification3rdPayload:
        self.elements["notification_3rd"]["sound"] = sound
        return self

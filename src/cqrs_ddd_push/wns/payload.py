"""WNS payload builders."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr


class WNSPayload:
    """Base for WNS payloads; ``notification_type`` feeds the X-WNS-Type header."""

    notification_type = ""
    content_type = "text/xml"

    def __init__(self) -> None:
        self.elements: dict[str, str] = {}

    def get_payload(self) -> str:
        raise NotImplementedError


class WNSToastPayload(WNSPayload):
    """Toast notification (``ToastText02`` template)."""

    notification_type = "wns/toast"

    def set_title(self, title: str) -> WNSToastPayload:
        self.elements["title"] = title
        return self

    def set_message(self, message: str) -> WNSToastPayload:
        self.elements["message"] = message
        return self

    def set_deeplink(self, deeplink: str) -> WNSToastPayload:
        """Launch argument handed to the app when the toast is activated."""
        self.elements["launch"] = deeplink
        return self

    def get_payload(self) -> str:
        launch = ""
        if "launch" in self.elements:
            launch = f" launch={quoteattr(self.elements['launch'])}"

        texts = ""
        if "title" in self.elements:
            texts += f'<text id="1">{escape(self.elements["title"])}</text>'
        if "message" in self.elements:
            texts += f'<text id="2">{escape(self.elements["message"])}</text>'

        return (
            '<?xml version="1.0" encoding="utf-8"?>'
            f"<toast{launch}><visual>"
            f'<binding template="ToastText02">{texts}</binding>'
            "</visual></toast>"
        )


class WNSRawPayload(WNSPayload):
    """Raw notification delivered untouched to the app."""

    notification_type = "wns/raw"
    content_type = "application/octet-stream"

    def set_data(self, data: str) -> WNSRawPayload:
        self.elements["data"] = data
        return self

    def get_payload(self) -> str:
        return self.elements.get("data", "")

"""Email notification payload."""

from __future__ import annotations

import email.message
import email.policy


class EmailPayload:
    """Subject and body of an email notification."""

    def __init__(self) -> None:
        self.elements: dict[str, str] = {}

    def set_subject(self, subject: str) -> EmailPayload:
        self.elements["subject"] = subject
        return self

    def set_body(self, body_text: str) -> EmailPayload:
        self.elements["body_text"] = body_text
        return self

    def set_html_body(self, body_html: str) -> EmailPayload:
        self.elements["body_html"] = body_html
        return self

    def get_payload(self) -> str:
        return self.elements.get("body_text", "")

    def build_message(self, sender: str, recipient: str) -> email.message.EmailMessage:
        message = email.message.EmailMessage(policy=email.policy.default)
        message["To"] = recipient
        message["From"] = sender
        if "subject" in self.elements:
            message["Subject"] = self.elements["subject"]

        body_text = self.elements.get("body_text", "")
        if "body_html" in self.elements:
            # Multipart with both text and HTML
            message.set_content(body_text, subtype="plain", charset="utf-8")
            message.add_alternative(self.elements["body_html"], subtype="html", charset="utf-8")
        else:
            message.set_content(body_text, charset="utf-8")
        return message

"""Base façade for responses backed by a delivery report."""

from __future__ import annotations

from .ports.response import INotificationResponse
from .report import DeliveryReport
from .status import PushNotificationStatus


class ReportResponse(INotificationResponse):
    """
    Notification response answering from one delivery report.

    Used by the multi-endpoint providers (APNS, Email, FCM batches).
    """

    def __init__(self, report: DeliveryReport, payload: str | None = None) -> None:
        self._report = report
        self.payload = payload

    @property
    def report(self) -> DeliveryReport:
        return self._report

    def get_status(self, endpoint: str) -> PushNotificationStatus:
        return self._report.get_status(endpoint)

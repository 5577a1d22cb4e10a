"""WNS notification response."""

from __future__ import annotations

from ..ports.logger import IDiagnosticLogger
from ..ports.response import INotificationResponse
from ..ports.transport import RawHttpResponse
from ..status import PushNotificationStatus
from .parser import WNSResponseParser


class WNSResponse(INotificationResponse):
    """Delivery status for the single channel URI a WNS request targeted."""

    def __init__(
        self,
        endpoint: str,
        status: PushNotificationStatus,
        payload: str | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.status = status
        self.payload = payload

    @classmethod
    def from_raw(
        cls,
        raw_response: RawHttpResponse,
        logger: IDiagnosticLogger | None = None,
        payload: str | None = None,
        parser: WNSResponseParser | None = None,
    ) -> WNSResponse:
        """Build the response for the channel URI the request was sent to."""
        endpoint = raw_response.url
        report = (parser or WNSResponseParser()).parse(raw_response, [endpoint], logger)
        return cls(endpoint, report[endpoint], payload)

    def get_status(self, endpoint: str) -> PushNotificationStatus:
        if endpoint != self.endpoint:
            return PushNotificationStatus.UNKNOWN
        return self.status

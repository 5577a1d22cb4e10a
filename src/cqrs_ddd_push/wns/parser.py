"""WNS response parser: HTTP status plus X-WNS-* headers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..diagnostics import emit_warning
from ..exceptions import MalformedResponseError
from ..ports.logger import IDiagnosticLogger
from ..ports.parser import IResponseParser
from ..ports.transport import RawHttpResponse
from ..report import DeliveryReport
from ..status import PushNotificationStatus

_log = logging.getLogger(__name__)

WNS_STATUS_HEADER = "X-WNS-Status"
WNS_DEVICE_STATUS_HEADER = "X-WNS-DeviceConnectionStatus"
WNS_ERROR_DESCRIPTION_HEADER = "X-WNS-Error-Description"
WNS_DEBUG_TRACE_HEADER = "X-WNS-Debug-Trace"

FAILURE_TEMPLATE = (
    "Push notification delivery status for endpoint %(endpoint)s: "
    "%(nstatus)s, device %(dstatus)s, description %(error_description)s, "
    "trace %(error_trace)s"
)

_HTTP_STATUSES: dict[int, PushNotificationStatus] = {
    404: PushNotificationStatus.INVALID_ENDPOINT,
    410: PushNotificationStatus.INVALID_ENDPOINT,
    400: PushNotificationStatus.ERROR,
    401: PushNotificationStatus.ERROR,
    403: PushNotificationStatus.ERROR,
    405: PushNotificationStatus.ERROR,
    413: PushNotificationStatus.ERROR,
    406: PushNotificationStatus.TEMPORARY_ERROR,
    500: PushNotificationStatus.TEMPORARY_ERROR,
    503: PushNotificationStatus.TEMPORARY_ERROR,
}


class WNSResponseParser(IResponseParser):
    """
    Classifies the response to a single WNS channel URI.

    WNS answers one request per endpoint, so ``endpoints`` must hold exactly
    one channel URI.
    """

    provider = "WNS"

    def parse(
        self,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        if len(endpoints) != 1:
            raise MalformedResponseError(
                self.provider, f"expected exactly one endpoint, got {len(endpoints)}"
            )
        endpoint = endpoints[0]
        sink = logger or _log

        status = self.classify(raw_response)
        if status is not PushNotificationStatus.SUCCESS:
            emit_warning(
                sink,
                FAILURE_TEMPLATE,
                {
                    "endpoint": endpoint,
                    "nstatus": raw_response.header(WNS_STATUS_HEADER),
                    "dstatus": raw_response.header(WNS_DEVICE_STATUS_HEADER),
                    "error_description": raw_response.header(WNS_ERROR_DESCRIPTION_HEADER),
                    "error_trace": raw_response.header(WNS_DEBUG_TRACE_HEADER),
                },
            )

        return DeliveryReport({endpoint: status})

    @staticmethod
    def classify(raw_response: RawHttpResponse) -> PushNotificationStatus:
        """Map HTTP status and ``X-WNS-Status`` onto a delivery status."""
        if raw_response.status_code is None:
            return PushNotificationStatus.ERROR
        if raw_response.status_code == 200:
            notification_status = raw_response.header(WNS_STATUS_HEADER)
            if notification_status == "received":
                return PushNotificationStatus.SUCCESS
            if notification_status == "channelthrottled":
                return PushNotificationStatus.TEMPORARY_ERROR
            return PushNotificationStatus.CLIENT_ERROR

        return _HTTP_STATUSES.get(raw_response.status_code, PushNotificationStatus.UNKNOWN)

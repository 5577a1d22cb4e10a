"""JPush parsers: push API results and delivery reports."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..diagnostics import emit_warning
from ..exceptions import MalformedResponseError
from ..ports.logger import IDiagnosticLogger
from ..ports.parser import IResponseParser
from ..ports.transport import RawHttpResponse
from ..report import DeliveryReport
from ..status import PushNotificationStatus

_log = logging.getLogger(__name__)

FAILURE_TEMPLATE = "Dispatching JPush notification failed for endpoint %(endpoint)s: %(error)s"
REPORT_TEMPLATE = "JPush delivery report for endpoint %(endpoint)s: %(error)s"

# Push API ``error.code`` values that say more than the HTTP status does.
ERROR_CODE_STATUSES = MappingProxyType(
    {
        1011: PushNotificationStatus.INVALID_ENDPOINT,  # cannot find user by this audience
        2002: PushNotificationStatus.TEMPORARY_ERROR,  # API call frequency exceeded
        2008: PushNotificationStatus.TEMPORARY_ERROR,  # too many requests
    }
)

_HTTP_FAILURES: dict[int, tuple[PushNotificationStatus, str]] = {
    400: (PushNotificationStatus.ERROR, "Invalid request"),
    401: (PushNotificationStatus.ERROR, "Error with authentication"),
    403: (PushNotificationStatus.ERROR, "Error with configuration"),
    404: (PushNotificationStatus.ERROR, "Invalid request path"),
    429: (PushNotificationStatus.TEMPORARY_ERROR, "Too many requests"),
}

# Report API per-registration ``status`` values.
REPORT_STATUSES = MappingProxyType(
    {
        0: (PushNotificationStatus.SUCCESS, "Delivered"),
        1: (PushNotificationStatus.UNKNOWN, "Not yet delivered"),
        2: (PushNotificationStatus.INVALID_ENDPOINT, "Registration id does not belong to the app"),
        3: (PushNotificationStatus.ERROR, "Registration id is not a target of the message"),
        4: (PushNotificationStatus.TEMPORARY_ERROR, "JPush system error"),
    }
)


class JPushPushResult(BaseModel):
    """Body of an accepted push. ``msg_id`` may arrive as a number or a numeric string."""

    model_config = ConfigDict(frozen=True)

    sendno: str | int | None = None
    msg_id: int


class JPushErrorDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: int
    message: str = ""


class JPushErrorBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: JPushErrorDetail


class JPushReportEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: int


_REPORT_ADAPTER = TypeAdapter(dict[str, JPushReportEntry])


def parse_message_id(raw_response: RawHttpResponse) -> str:
    """``msg_id`` of an accepted push, needed to request its delivery report."""
    try:
        return str(JPushPushResult.model_validate_json(raw_response.body).msg_id)
    except ValidationError as e:
        raise MalformedResponseError("JPush", str(e)) from e


class JPushBatchResponseParser(IResponseParser):
    """
    Classifies the endpoints of one JPush push request.

    An accepted push (HTTP 200) marks every endpoint SUCCESS; the delivery
    report can refine that later. A rejected push applies to all endpoints.
    """

    provider = "JPush"

    def parse(
        self,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        sink = logger or _log

        if raw_response.status_code == 200:
            parse_message_id(raw_response)
            return DeliveryReport.for_endpoints(endpoints, PushNotificationStatus.SUCCESS)

        status, error = self._classify_failure(raw_response)
        for endpoint in endpoints:
            emit_warning(sink, FAILURE_TEMPLATE, {"endpoint": endpoint, "error": error})
        return DeliveryReport.for_endpoints(endpoints, status)

    @staticmethod
    def _classify_failure(raw_response: RawHttpResponse) -> tuple[PushNotificationStatus, str]:
        status_code = raw_response.status_code
        if status_code is None:
            return PushNotificationStatus.ERROR, "No response received"

        if status_code in _HTTP_FAILURES:
            status, error = _HTTP_FAILURES[status_code]
        elif 500 <= status_code < 600:
            status, error = PushNotificationStatus.TEMPORARY_ERROR, "Internal error"
        else:
            status, error = PushNotificationStatus.UNKNOWN, "Unknown error"

        try:
            detail = JPushErrorBody.model_validate_json(raw_response.body).error
        except ValidationError:
            # Gateways in front of JPush answer with HTML or empty bodies.
            return status, error

        return ERROR_CODE_STATUSES.get(detail.code, status), detail.message or error


class JPushReportParser(IResponseParser):
    """Classifies endpoints from the JPush delivery report of one message."""

    provider = "JPush"

    def parse(
        self,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        sink = logger or _log

        if raw_response.status_code != 200:
            for endpoint in endpoints:
                emit_warning(
                    sink,
                    REPORT_TEMPLATE,
                    {"endpoint": endpoint, "error": "Report could not be fetched"},
                )
            return DeliveryReport.for_endpoints(endpoints)

        try:
            entries = _REPORT_ADAPTER.validate_json(raw_response.body)
        except ValidationError as e:
            raise MalformedResponseError(self.provider, str(e)) from e

        statuses: dict[str, PushNotificationStatus] = {}
        for endpoint in endpoints:
            entry = entries.get(endpoint)
            if entry is None:
                status, error = PushNotificationStatus.UNKNOWN, "Missing from report"
            else:
                status, error = REPORT_STATUSES.get(
                    entry.status, (PushNotificationStatus.UNKNOWN, f"Unknown status {entry.status}")
                )

            statuses[endpoint] = status
            if status is not PushNotificationStatus.SUCCESS:
                emit_warning(sink, REPORT_TEMPLATE, {"endpoint": endpoint, "error": error})

        return DeliveryReport(statuses)

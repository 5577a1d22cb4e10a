"""FCM batch response parser for the legacy multicast HTTP API."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..diagnostics import emit_warning
from ..exceptions import MalformedResponseError
from ..ports.logger import IDiagnosticLogger
from ..ports.parser import IResponseParser
from ..ports.transport import RawHttpResponse
from ..report import DeliveryReport
from ..status import PushNotificationStatus

_log = logging.getLogger(__name__)

FAILURE_TEMPLATE = "Dispatching FCM notification failed for endpoint %(endpoint)s: %(error)s"

DEFAULT_ERROR_STATUSES = MappingProxyType(
    {
        "InvalidRegistration": PushNotificationStatus.INVALID_ENDPOINT,
        "NotRegistered": PushNotificationStatus.INVALID_ENDPOINT,
        "Unavailable": PushNotificationStatus.TEMPORARY_ERROR,
        "InternalServerError": PushNotificationStatus.TEMPORARY_ERROR,
        "DeviceMessageRateExceeded": PushNotificationStatus.TEMPORARY_ERROR,
        "TopicsMessageRateExceeded": PushNotificationStatus.TEMPORARY_ERROR,
        "MissingRegistration": PushNotificationStatus.ERROR,
        "MismatchSenderId": PushNotificationStatus.ERROR,
        "InvalidPackageName": PushNotificationStatus.ERROR,
        "MessageTooBig": PushNotificationStatus.ERROR,
        "InvalidDataKey": PushNotificationStatus.ERROR,
        "InvalidTtl": PushNotificationStatus.ERROR,
        "InvalidApnsCredential": PushNotificationStatus.ERROR,
    }
)


class FcmResult(BaseModel):
    """Per-registration result, positionally aligned with ``registration_ids``."""

    model_config = ConfigDict(frozen=True)

    message_id: str | None = None
    registration_id: str | None = None
    error: str | None = None


class FcmSendResponse(BaseModel):
    """Body of a successful (HTTP 200) multicast send."""

    model_config = ConfigDict(frozen=True)

    multicast_id: int | None = None
    success: int = 0
    failure: int = 0
    results: list[FcmResult] = Field(...)


class FCMBatchResponseParser(IResponseParser):
    """
    Classifies the endpoints of one FCM batch.

    On HTTP 200 each entry of ``results`` belongs to the endpoint at the same
    position of the request. Any other outcome applies to the whole batch.
    """

    provider = "FCM"

    def __init__(self, error_statuses: Mapping[str, PushNotificationStatus] | None = None) -> None:
        self.error_statuses = dict(DEFAULT_ERROR_STATUSES)
        self.error_statuses.update(error_statuses or {})

    def parse(
        self,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        sink = logger or _log

        if raw_response.status_code == 200:
            return self._parse_results(raw_response, endpoints, sink)

        status, error = self._classify_http_failure(raw_response.status_code)
        for endpoint in endpoints:
            emit_warning(sink, FAILURE_TEMPLATE, {"endpoint": endpoint, "error": error})
        return DeliveryReport.for_endpoints(endpoints, status)

    def _parse_results(
        self,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        sink: IDiagnosticLogger,
    ) -> DeliveryReport:
        try:
            body = FcmSendResponse.model_validate_json(raw_response.body)
        except ValidationError as e:
            raise MalformedResponseError(self.provider, str(e)) from e

        if len(body.results) > len(endpoints):
            raise MalformedResponseError(
                self.provider,
                f"{len(body.results)} results for a batch of {len(endpoints)} endpoints",
            )

        statuses: dict[str, PushNotificationStatus] = {}
        for position, endpoint in enumerate(endpoints):
            result = body.results[position] if position < len(body.results) else None

            if result is not None and result.error is None and result.message_id is not None:
                statuses[endpoint] = PushNotificationStatus.SUCCESS
                continue

            if result is not None and result.error is not None:
                error = result.error
                statuses[endpoint] = self.error_statuses.get(error, PushNotificationStatus.UNKNOWN)
            else:
                error = "No result reported"
                statuses[endpoint] = PushNotificationStatus.UNKNOWN

            emit_warning(sink, FAILURE_TEMPLATE, {"endpoint": endpoint, "error": error})

        return DeliveryReport(statuses)

    @staticmethod
    def _classify_http_failure(status_code: int | None) -> tuple[PushNotificationStatus, str]:
        if status_code is None:
            return PushNotificationStatus.ERROR, "No response received"
        if status_code == 400:
            return PushNotificationStatus.ERROR, "Invalid JSON"
        if status_code == 401:
            return PushNotificationStatus.ERROR, "Error with authentication"
        if 500 <= status_code < 600:
            return PushNotificationStatus.TEMPORARY_ERROR, "Internal error"
        return PushNotificationStatus.UNKNOWN, "Unknown error"

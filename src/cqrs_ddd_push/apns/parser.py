"""APNS response parser for legacy binary-protocol batch results."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from ..diagnostics import emit_warning
from ..exceptions import MalformedResponseError
from ..ports.logger import IDiagnosticLogger
from ..ports.parser import IResponseParser
from ..report import DeliveryReport
from ..status import PushNotificationStatus
from .models import ApnsErrorRecord, ApnsRawResponse
from .reasons import DEFAULT_CODE_STATUSES, DEFAULT_REASON_STATUSES, HTTP_STATUS_THRESHOLD

_log = logging.getLogger(__name__)

FAILURE_TEMPLATE = "Dispatching push notification failed for endpoint %(endpoint)s: %(error)s"


class APNSResponseParser(IResponseParser):
    """
    Classifies the endpoints of one APNS batch.

    Every endpoint starts as SUCCESS. Endpoints reported invalid stay
    INVALID_ENDPOINT whatever their error records say. Each error record is
    classified by its JSON ``reason`` when the status code is HTTP-style,
    otherwise by the numeric status code.
    """

    provider = "APNS"

    def __init__(
        self,
        reason_statuses: Mapping[str, PushNotificationStatus] | None = None,
        code_statuses: Mapping[int, PushNotificationStatus] | None = None,
    ) -> None:
        self.reason_statuses = dict(DEFAULT_REASON_STATUSES)
        self.reason_statuses.update(reason_statuses or {})
        self.code_statuses = dict(DEFAULT_CODE_STATUSES)
        self.code_statuses.update(code_statuses or {})

    def parse(
        self,
        raw_response: ApnsRawResponse | Mapping[str, Any],
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        raw = self._validate(raw_response)
        sink = logger or _log

        statuses = {endpoint: PushNotificationStatus.SUCCESS for endpoint in endpoints}

        for endpoint in raw.invalid_endpoints:
            self._require_known(endpoint, statuses)
            statuses[endpoint] = PushNotificationStatus.INVALID_ENDPOINT

        for index, records in raw.errors.items():
            if index not in raw.recipients:
                raise MalformedResponseError(
                    self.provider, f"no recipient recorded for message #{index}"
                )
            endpoint = raw.recipients[index]
            self._require_known(endpoint, statuses)

            for record in records:
                status, error = self.classify(record)
                # SUCCESS ranks lowest, so the first error always replaces it.
                statuses[endpoint] = PushNotificationStatus.worst(statuses[endpoint], status)
                emit_warning(sink, FAILURE_TEMPLATE, {"endpoint": endpoint, "error": error})

        return DeliveryReport(statuses)

    def classify(self, record: ApnsErrorRecord) -> tuple[PushNotificationStatus, str]:
        """Return the status for one error record and the text to log for it."""
        if record.status_code >= HTTP_STATUS_THRESHOLD:
            reason = record.reason
            if reason is not None:
                status = self.reason_statuses.get(reason)
                if status is None:
                    status = self.code_statuses.get(
                        record.status_code, PushNotificationStatus.UNKNOWN
                    )
                return status, reason

        status = self.code_statuses.get(record.status_code, PushNotificationStatus.UNKNOWN)
        return status, record.status_message

    def _validate(self, raw_response: ApnsRawResponse | Mapping[str, Any]) -> ApnsRawResponse:
        if isinstance(raw_response, ApnsRawResponse):
            return raw_response
        try:
            return ApnsRawResponse.model_validate(raw_response)
        except ValidationError as e:
            raise MalformedResponseError(self.provider, str(e)) from e

    def _require_known(self, endpoint: str, statuses: Mapping[str, Any]) -> None:
        if endpoint not in statuses:
            raise MalformedResponseError(
                self.provider, f"endpoint {endpoint!r} was not part of this send"
            )

"""Email response parser: per-recipient success/failure flags."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..diagnostics import emit_warning
from ..exceptions import MalformedResponseError
from ..ports.logger import IDiagnosticLogger
from ..ports.parser import IResponseParser
from ..report import DeliveryReport
from ..status import PushNotificationStatus

_log = logging.getLogger(__name__)

FAILURE_TEMPLATE = "Sending email notification to %(endpoint)s failed: %(message)s"


class EmailResult(BaseModel):
    """Outcome of sending the notification email to one address."""

    model_config = ConfigDict(frozen=True)

    is_error: bool
    error_message: str


class EmailResponseParser(IResponseParser):
    """Maps ``{endpoint: {is_error, error_message}}`` onto statuses."""

    provider = "Email"

    def parse(
        self,
        raw_response: Mapping[str, EmailResult | Mapping[str, Any]],
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        sink = logger or _log

        unexpected = set(raw_response) - set(endpoints)
        if unexpected:
            raise MalformedResponseError(
                self.provider, f"results for addresses outside the send: {sorted(unexpected)}"
            )

        statuses = {endpoint: PushNotificationStatus.UNKNOWN for endpoint in endpoints}
        for endpoint, raw_result in raw_response.items():
            result = self._validate(raw_result)
            if result.is_error:
                statuses[endpoint] = PushNotificationStatus.ERROR
                emit_warning(
                    sink,
                    FAILURE_TEMPLATE,
                    {"endpoint": endpoint, "message": result.error_message},
                )
            else:
                statuses[endpoint] = PushNotificationStatus.SUCCESS

        for endpoint in endpoints:
            if endpoint not in raw_response:
                emit_warning(
                    sink,
                    FAILURE_TEMPLATE,
                    {"endpoint": endpoint, "message": "No result reported"},
                )

        return DeliveryReport(statuses)

    def _validate(self, raw_result: EmailResult | Mapping[str, Any]) -> EmailResult:
        if isinstance(raw_result, EmailResult):
            return raw_result
        try:
            return EmailResult.model_validate(raw_result)
        except ValidationError as e:
            raise MalformedResponseError(self.provider, str(e)) from e

"""APNS notification response."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from operator import attrgetter
from typing import Any

from ..ports.logger import IDiagnosticLogger
from ..response import ReportResponse
from .models import ApnsRawResponse
from .parser import APNSResponseParser


class APNSResponse(ReportResponse):
    """Delivery statuses for every device token of one APNS batch."""

    @classmethod
    def from_raw(
        cls,
        raw_response: ApnsRawResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
        payload: str | None = None,
        parser: APNSResponseParser | None = None,
    ) -> APNSResponse:
        report = (parser or APNSResponseParser()).parse(raw_response, endpoints, logger)
        return cls(report, payload)

    @classmethod
    def from_error_queue(
        cls,
        endpoints: Sequence[str],
        error_queue: Mapping[int, Mapping[str, Any]],
        invalid_endpoints: Iterable[str] = (),
        logger: IDiagnosticLogger | None = None,
        payload: str | None = None,
        recipient_of: Callable[[Any], str] = attrgetter("recipient"),
    ) -> APNSResponse:
        """Build straight from an APNS client error queue."""
        raw = ApnsRawResponse.from_error_queue(error_queue, invalid_endpoints, recipient_of)
        return cls.from_raw(raw, endpoints, logger, payload)

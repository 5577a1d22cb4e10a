"""Email notification response."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..ports.logger import IDiagnosticLogger
from ..response import ReportResponse
from .parser import EmailResponseParser, EmailResult


class EmailResponse(ReportResponse):
    """Delivery statuses for every address an email notification went to."""

    @classmethod
    def from_raw(
        cls,
        mail_results: Mapping[str, EmailResult | Mapping[str, Any]],
        endpoints: Sequence[str] | None = None,
        logger: IDiagnosticLogger | None = None,
        payload: str | None = None,
        parser: EmailResponseParser | None = None,
    ) -> EmailResponse:
        """``endpoints`` defaults to the addresses present in ``mail_results``."""
        send_set = list(mail_results) if endpoints is None else endpoints
        report = (parser or EmailResponseParser()).parse(mail_results, send_set, logger)
        return cls(report, payload)

"""Provider response parser port."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from ..report import DeliveryReport
from .logger import IDiagnosticLogger


@runtime_checkable
class IResponseParser(Protocol):
    """
    Maps one raw provider response onto a delivery report.

    Implementations: WNSResponseParser, APNSResponseParser,
    FCMBatchResponseParser, JPushBatchResponseParser, JPushReportParser,
    EmailResponseParser.
    """

    provider: str

    def parse(
        self,
        raw_response: Any,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
    ) -> DeliveryReport:
        """Return a report whose keys are exactly ``endpoints``."""
        ...

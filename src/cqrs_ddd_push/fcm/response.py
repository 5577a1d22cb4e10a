"""FCM notification responses: per batch and cumulative."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..merger import BatchResponseMerger, default_merger
from ..ports.logger import IDiagnosticLogger
from ..ports.response import INotificationResponse
from ..ports.transport import RawHttpResponse
from ..report import CumulativeReport, DeliveryReport
from ..response import ReportResponse
from ..status import PushNotificationStatus
from .parser import FCMBatchResponseParser


class FCMBatchResponse(ReportResponse):
    """Statuses for the endpoints of one FCM request."""

    @classmethod
    def from_raw(
        cls,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
        payload: str | None = None,
        parser: FCMBatchResponseParser | None = None,
    ) -> FCMBatchResponse:
        report = (parser or FCMBatchResponseParser()).parse(raw_response, endpoints, logger)
        return cls(report, payload)


class FCMResponse(INotificationResponse):
    """
    Cumulative statuses across every batch of one FCM send.

    FCM limits the number of registration ids per request, so a send is
    split into batches and each batch response is folded in here.
    """

    def __init__(self, merger: BatchResponseMerger | None = None) -> None:
        self._merger = merger or default_merger
        self._statuses = CumulativeReport()

    def add_batch_response(
        self,
        batch_response: INotificationResponse,
        endpoints: Iterable[str],
    ) -> None:
        """Record ``batch_response``'s answer for each endpoint of that batch."""
        self._merger.merge(self._statuses, batch_response, endpoints)

    @property
    def report(self) -> DeliveryReport:
        return self._statuses.snapshot()

    def get_status(self, endpoint: str) -> PushNotificationStatus:
        return self._statuses.get_status(endpoint)

"""JPush notification response."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..merger import BatchResponseMerger, default_merger
from ..ports.logger import IDiagnosticLogger
from ..ports.response import INotificationResponse
from ..ports.transport import RawHttpResponse
from ..report import CumulativeReport, DeliveryReport
from ..status import PushNotificationStatus
from .parser import JPushBatchResponseParser, parse_message_id


class JPushResponse(INotificationResponse):
    """
    Statuses of one JPush send.

    Starts from the push API outcome and is refined by delivery reports,
    which carry fresher provider data and therefore replace earlier values.
    """

    def __init__(
        self,
        message_id: str | None = None,
        payload: str | None = None,
        merger: BatchResponseMerger | None = None,
    ) -> None:
        self.message_id = message_id
        self.payload = payload
        self._merger = merger or default_merger
        self._statuses = CumulativeReport()

    @classmethod
    def from_raw(
        cls,
        raw_response: RawHttpResponse,
        endpoints: Sequence[str],
        logger: IDiagnosticLogger | None = None,
        payload: str | None = None,
        parser: JPushBatchResponseParser | None = None,
    ) -> JPushResponse:
        report = (parser or JPushBatchResponseParser()).parse(raw_response, endpoints, logger)
        message_id = parse_message_id(raw_response) if raw_response.status_code == 200 else None
        response = cls(message_id, payload)
        response.add_report(report, endpoints)
        return response

    def add_report(self, report: DeliveryReport, endpoints: Iterable[str]) -> None:
        self._merger.merge(self._statuses, report, endpoints)

    @property
    def report(self) -> DeliveryReport:
        return self._statuses.snapshot()

    def get_status(self, endpoint: str) -> PushNotificationStatus:
        return self._statuses.get_status(endpoint)

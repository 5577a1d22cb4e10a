"""Folding per-batch results into one cumulative delivery report."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Union

from .ports.response import INotificationResponse
from .report import CumulativeReport
from .status import PushNotificationStatus

logger = logging.getLogger(__name__)

PartialSource = Union[INotificationResponse, Mapping[str, PushNotificationStatus]]


class BatchResponseMerger:
    """
    Merges the result of one batch into a cumulative report.

    For every endpoint of the batch the partial source is consulted and its
    answer is written into the cumulative report, replacing any earlier
    value (last write wins). Endpoints outside the batch are left untouched.
    Calls on the same cumulative report must be serialized by the caller.
    """

    def merge(
        self,
        cumulative: CumulativeReport,
        partial: PartialSource,
        endpoints: Iterable[str],
    ) -> CumulativeReport:
        lookup = self._lookup(partial)
        for endpoint in endpoints:
            status = lookup(endpoint)
            cumulative[endpoint] = status if status is not None else PushNotificationStatus.UNKNOWN
        return cumulative

    def merge_all(
        self,
        batches: Iterable[tuple[PartialSource, Iterable[str]]],
        cumulative: CumulativeReport | None = None,
    ) -> CumulativeReport:
        """Merge ``(partial, endpoints)`` pairs in iteration order."""
        report = cumulative if cumulative is not None else CumulativeReport()
        for partial, endpoints in batches:
            self.merge(report, partial, endpoints)
        logger.debug(f"Merged batch results into report of {len(report)} endpoints")
        return report

    @staticmethod
    def _lookup(partial: PartialSource) -> Callable[[str], PushNotificationStatus | None]:
        if isinstance(partial, Mapping):
            return partial.get
        return partial.get_status


default_merger = BatchResponseMerger()

"""Delivery reports: endpoint to status mappings produced by parsers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .status import PushNotificationStatus


class DeliveryReport(Mapping[str, PushNotificationStatus]):
    """
    Read-only mapping of endpoint to delivery status for one send.

    The key set is exactly the set of endpoints that were part of the send.
    """

    def __init__(self, statuses: Mapping[str, PushNotificationStatus] | None = None) -> None:
        self._statuses: dict[str, PushNotificationStatus] = dict(statuses or {})

    @classmethod
    def for_endpoints(
        cls,
        endpoints: Iterable[str],
        status: PushNotificationStatus = PushNotificationStatus.UNKNOWN,
    ) -> DeliveryReport:
        """Create a report assigning the same status to every endpoint."""
        return cls({endpoint: status for endpoint in endpoints})

    def get_status(self, endpoint: str) -> PushNotificationStatus:
        """Status for ``endpoint``, UNKNOWN if it was not part of the send."""
        return self._statuses.get(endpoint, PushNotificationStatus.UNKNOWN)

    @property
    def endpoints(self) -> list[str]:
        return list(self._statuses)

    def with_status(self, status: PushNotificationStatus) -> list[str]:
        """Endpoints currently holding ``status``."""
        return [endpoint for endpoint, value in self._statuses.items() if value is status]

    def __getitem__(self, endpoint: str) -> PushNotificationStatus:
        return self._statuses[endpoint]

    def __iter__(self) -> Iterator[str]:
        return iter(self._statuses)

    def __len__(self) -> int:
        return len(self._statuses)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v.name}" for k, v in self._statuses.items())
        return f"{type(self).__name__}({{{inner}}})"


class CumulativeReport(DeliveryReport):
    """
    Mutable report spanning every batch of one logical multi-batch send.

    Owned by the caller driving the batches and written only through
    :class:`~cqrs_ddd_push.merger.BatchResponseMerger`. Not thread-safe.
    """

    def __setitem__(self, endpoint: str, status: PushNotificationStatus) -> None:
        self._statuses[endpoint] = status

    def snapshot(self) -> DeliveryReport:
        """Return an immutable copy of the current state."""
        return DeliveryReport(self._statuses)

"""In-memory transport for test assertions."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from cqrs_ddd_push.ports.transport import ITransport, RawHttpResponse

logger = logging.getLogger(__name__)


@dataclass
class SentRequest:
    """Record of a posted request for test assertions."""

    url: str
    body: str
    headers: dict[str, str]
    auth: tuple[str, str] | None


class InMemoryTransport(ITransport):
    """
    Test double (Fake) that records requests and replays queued responses.

    Responses are handed out in the order they were queued, regardless of
    the URL posted to. With nothing queued, every request gets a bare 200.
    """

    def __init__(self, responses: list[RawHttpResponse] | None = None) -> None:
        self.sent_requests: list[SentRequest] = []
        self._responses: deque[RawHttpResponse] = deque(responses or [])

    def queue(self, *responses: RawHttpResponse) -> None:
        self._responses.extend(responses)

    async def post(
        self,
        url: str,
        body: str,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> RawHttpResponse:
        self.sent_requests.append(SentRequest(url, body, dict(headers or {}), auth))
        if self._responses:
            return self._responses.popleft()
        return RawHttpResponse(url=url, status_code=200)

    def assert_posted(self, url: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [r for r in self.sent_requests if r.url == url]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} requests to {url}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear recorded requests and queued responses."""
        self.sent_requests.clear()
        self._responses.clear()

"""WNS dispatcher: one HTTP request per channel URI."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..ports.logger import IDiagnosticLogger
from ..ports.transport import ITransport
from .parser import WNSResponseParser
from .payload import WNSPayload
from .response import WNSResponse

logger = logging.getLogger(__name__)


class WNSDispatcher:
    """
    Sends a WNS payload to each channel URI concurrently.

    The OAuth access token is obtained elsewhere and passed in.
    """

    def __init__(
        self,
        transport: ITransport,
        access_token: str,
        diagnostic_logger: IDiagnosticLogger | None = None,
    ):
        self.transport = transport
        self.access_token = access_token
        self.diagnostic_logger = diagnostic_logger or logger
        self.parser = WNSResponseParser()

    def _headers(self, payload: WNSPayload) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": payload.content_type,
            "X-WNS-Type": payload.notification_type,
        }

    async def push(self, payload: WNSPayload, endpoints: Sequence[str]) -> dict[str, WNSResponse]:
        """Return one response per channel URI, keyed by that URI."""
        if not payload.notification_type:
            raise ValueError(f"{type(payload).__name__} has no WNS notification type")

        body = payload.get_payload()
        headers = self._headers(payload)

        raw_responses = await asyncio.gather(
            *(self.transport.post(endpoint, body, headers=headers) for endpoint in endpoints)
        )

        responses: dict[str, WNSResponse] = {}
        for endpoint, raw in zip(endpoints, raw_responses):
            report = self.parser.parse(raw, [endpoint], self.diagnostic_logger)
            responses[endpoint] = WNSResponse(endpoint, report[endpoint], body)

        logger.debug(f"Dispatched WNS notification to {len(responses)} channel(s)")
        return responses

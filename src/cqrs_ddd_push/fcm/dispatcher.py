"""FCM dispatcher: splits a send into batches and merges their results."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..merger import BatchResponseMerger
from ..ports.logger import IDiagnosticLogger
from ..ports.transport import ITransport
from .parser import FCMBatchResponseParser
from .payload import FCMPayload
from .response import FCMBatchResponse, FCMResponse

logger = logging.getLogger(__name__)

FCM_SEND_URL = "https://fcm.googleapis.com/fcm/send"
FCM_MAX_BATCH_SIZE = 1000


class FCMDispatcher:
    """
    Sends an FCM payload to any number of registration ids.

    Batches are posted concurrently; their results are merged into the
    cumulative response in batch order once all of them have returned.
    """

    def __init__(
        self,
        transport: ITransport,
        auth_token: str = "",
        url: str = FCM_SEND_URL,
        batch_size: int = FCM_MAX_BATCH_SIZE,
        diagnostic_logger: IDiagnosticLogger | None = None,
        merger: BatchResponseMerger | None = None,
    ):
        if not 1 <= batch_size <= FCM_MAX_BATCH_SIZE:
            raise ValueError(f"batch_size must be within 1..{FCM_MAX_BATCH_SIZE}")
        self.transport = transport
        self.auth_token = auth_token
        self.url = url
        self.batch_size = batch_size
        self.diagnostic_logger = diagnostic_logger or logger
        self.merger = merger
        self.parser = FCMBatchResponseParser()

    def _batches(self, endpoints: Sequence[str]) -> list[list[str]]:
        return [
            list(endpoints[start : start + self.batch_size])
            for start in range(0, len(endpoints), self.batch_size)
        ]

    async def push(self, payload: FCMPayload, endpoints: Sequence[str]) -> FCMResponse:
        response = FCMResponse(self.merger)
        if not endpoints:
            return response

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"key={self.auth_token}",
        }
        batches = self._batches(endpoints)
        bodies = [payload.for_batch(batch) for batch in batches]

        raw_responses = await asyncio.gather(
            *(self.transport.post(self.url, body, headers=headers) for body in bodies)
        )

        for batch, body, raw in zip(batches, bodies, raw_responses):
            batch_response = FCMBatchResponse.from_raw(
                raw, batch, self.diagnostic_logger, body, self.parser
            )
            response.add_batch_response(batch_response, batch)

        logger.debug(f"Dispatched FCM notification in {len(batches)} batch(es)")
        return response

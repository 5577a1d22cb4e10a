"""JPush dispatcher: push request plus optional delivery report."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..ports.logger import IDiagnosticLogger
from ..ports.transport import ITransport
from ..status import PushNotificationStatus
from .parser import JPushBatchResponseParser, JPushReportParser
from .payload import JPushPayload
from .response import JPushResponse

logger = logging.getLogger(__name__)

JPUSH_PUSH_URL = "https://api.jpush.cn/v3/push"
JPUSH_REPORT_URL = "https://report.jpush.cn/v3/status/message"
JPUSH_MAX_AUDIENCE = 1000


class JPushDispatcher:
    """
    Sends a JPush payload and, if asked, fetches its delivery report.

    Authenticates with HTTP basic auth (app key, master secret).
    """

    def __init__(
        self,
        transport: ITransport,
        app_key: str,
        master_secret: str,
        push_url: str = JPUSH_PUSH_URL,
        report_url: str = JPUSH_REPORT_URL,
        diagnostic_logger: IDiagnosticLogger | None = None,
    ):
        self.transport = transport
        self.app_key = app_key
        self.master_secret = master_secret
        self.push_url = push_url
        self.report_url = report_url
        self.diagnostic_logger = diagnostic_logger or logger
        self.push_parser = JPushBatchResponseParser()
        self.report_parser = JPushReportParser()

    @property
    def _auth(self) -> tuple[str, str]:
        return (self.app_key, self.master_secret)

    async def push(
        self,
        payload: JPushPayload,
        endpoints: Sequence[str],
        fetch_report: bool = False,
    ) -> JPushResponse:
        if len(endpoints) > JPUSH_MAX_AUDIENCE:
            raise ValueError(
                f"JPush accepts at most {JPUSH_MAX_AUDIENCE} registration ids per push, "
                f"got {len(endpoints)}"
            )

        body = payload.for_endpoints(endpoints)
        raw = await self.transport.post(
            self.push_url,
            body,
            headers={"Content-Type": "application/json"},
            auth=self._auth,
        )
        response = JPushResponse.from_raw(
            raw, endpoints, self.diagnostic_logger, body, self.push_parser
        )

        if fetch_report and response.message_id is not None:
            await self.update_report(response)

        return response

    async def update_report(self, response: JPushResponse) -> None:
        """
        Refine accepted endpoints of ``response`` with the JPush delivery report.

        Only endpoints the push API accepted are queried. A report that could
        not be fetched leaves the response unchanged.
        """
        if response.message_id is None:
            raise ValueError("Cannot fetch a JPush report without a message id")

        accepted = response.report.with_status(PushNotificationStatus.SUCCESS)
        if not accepted:
            return

        raw = await self.transport.post(
            self.report_url,
            json.dumps({"msg_id": int(response.message_id), "registration_ids": accepted}),
            headers={"Content-Type": "application/json"},
            auth=self._auth,
        )
        if raw.status_code != 200:
            logger.warning(
                f"JPush report for message {response.message_id} unavailable "
                f"(HTTP {raw.status_code})"
            )
            return

        report = self.report_parser.parse(raw, accepted, self.diagnostic_logger)
        response.add_report(report, accepted)

"""Email dispatcher over SMTP."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..ports.logger import IDiagnosticLogger
from .parser import EmailResponseParser, EmailResult
from .payload import EmailPayload
from .response import EmailResponse

logger = logging.getLogger(__name__)


class EmailDispatcher:
    """
    Async SMTP dispatcher using aiosmtplib.

    Sends one message per address over a single connection and records a
    success/failure flag for each of them.
    """

    def __init__(
        self,
        host: str,
        from_email: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
        diagnostic_logger: IDiagnosticLogger | None = None,
    ):
        self.host = host
        self.from_email = from_email
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.diagnostic_logger = diagnostic_logger or logger
        self.parser = EmailResponseParser()

    async def push(self, payload: EmailPayload, endpoints: Sequence[str]) -> EmailResponse:
        # Lazy import of aiosmtplib
        try:
            import aiosmtplib
        except ImportError as e:
            raise ImportError(
                "aiosmtplib is required for EmailDispatcher. "
                "Install with: pip install 'cqrs-ddd-push[smtp]'"
            ) from e

        results: dict[str, EmailResult] = {}
        try:
            async with aiosmtplib.SMTP(
                hostname=self.host,
                port=self.port,
                timeout=self.timeout,
                start_tls=self.use_tls,
            ) as smtp:
                if self.username and self.password:
                    await smtp.login(self.username, self.password)

                for endpoint in endpoints:
                    message = payload.build_message(self.from_email, endpoint)
                    try:
                        await smtp.send_message(message)
                        results[endpoint] = EmailResult(is_error=False, error_message="")
                    except aiosmtplib.SMTPException as e:
                        results[endpoint] = EmailResult(is_error=True, error_message=str(e))

        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP session with {self.host} failed: {str(e)}")
            for endpoint in endpoints:
                results.setdefault(endpoint, EmailResult(is_error=True, error_message=str(e)))

        return EmailResponse.from_raw(
            results, endpoints, self.diagnostic_logger, payload.get_payload(), self.parser
        )

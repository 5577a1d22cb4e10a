"""HTTP transport implementation using httpx."""

from __future__ import annotations

import logging
from typing import Any

from ..ports.transport import ITransport, RawHttpResponse

logger = logging.getLogger(__name__)


class HttpxTransport(ITransport):
    """
    Posts provider requests with ``httpx.AsyncClient``.

    HTTP error statuses are returned as-is for the parsers to classify.
    Requests that never get a response, including ones to URLs httpx cannot
    parse, come back with ``status_code=None``.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = "cqrs-ddd-push/0.1.0",
        client: Any = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client

    async def post(
        self,
        url: str,
        body: str,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> RawHttpResponse:
        # Lazy import of httpx
        try:
            import httpx
        except ImportError as e:
            raise ImportError(
                "httpx is required for HttpxTransport. "
                "Install with: pip install 'cqrs-ddd-push[http]'"
            ) from e

        request_headers = {"User-Agent": self.user_agent, **(headers or {})}

        try:
            if self._client is not None:
                response = await self._client.post(
                    url, content=body, headers=request_headers, auth=auth
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        url, content=body, headers=request_headers, auth=auth
                    )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            return RawHttpResponse.failed(url)

        return RawHttpResponse(
            url=url,
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )

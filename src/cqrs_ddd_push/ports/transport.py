"""HTTP transport port and the raw response it produces."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class RawHttpResponse:
    """
    Provider HTTP response as handed to the parsers.

    ``status_code`` is None when no response was obtained at all
    (connection refused, timeout, TLS failure).
    """

    url: str
    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def failed(cls, url: str) -> RawHttpResponse:
        """Response object for a request that never got an answer."""
        return cls(url=url)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def json(self) -> Any:
        return json.loads(self.body)


@runtime_checkable
class ITransport(Protocol):
    """
    Framework-agnostic HTTP transport used by the dispatchers.

    Implementations: HttpxTransport, InMemoryTransport.
    """

    async def post(
        self,
        url: str,
        body: str,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> RawHttpResponse:
        """POST ``body`` and return the raw response; never raises for HTTP errors."""
        ...

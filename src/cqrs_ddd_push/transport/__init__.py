"""HTTP transport adapters."""

from __future__ import annotations

from .httpx import HttpxTransport

__all__ = ["HttpxTransport"]

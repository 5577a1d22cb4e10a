"""In-memory adapters for testing."""

from __future__ import annotations

from .fake import InMemoryTransport, SentRequest

__all__ = ["InMemoryTransport", "SentRequest"]

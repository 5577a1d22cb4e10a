"""Email as a notification channel."""

from __future__ import annotations

from .dispatcher import EmailDispatcher
from .parser import EmailResponseParser, EmailResult
from .payload import EmailPayload
from .response import EmailResponse

__all__ = [
    "EmailDispatcher",
    "EmailPayload",
    "EmailResponse",
    "EmailResponseParser",
    "EmailResult",
]

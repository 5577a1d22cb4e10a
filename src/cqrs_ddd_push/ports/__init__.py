"""Port definitions for push notification delivery."""

from __future__ import annotations

from .logger import IDiagnosticLogger
from .parser import IResponseParser
from .response import INotificationResponse
from .transport import ITransport, RawHttpResponse

__all__ = [
    "IDiagnosticLogger",
    "IResponseParser",
    "INotificationResponse",
    "ITransport",
    "RawHttpResponse",
]

"""Push notification delivery for CQRS/DDD: APNS, FCM, WNS, JPush and Email.

Every provider's response is normalized into one
:class:`PushNotificationStatus` per endpoint.
"""

from __future__ import annotations

from .apns import APNSPayload, APNSResponse, APNSResponseParser, ApnsRawResponse
from .email import EmailDispatcher, EmailPayload, EmailResponse, EmailResponseParser
from .exceptions import MalformedResponseError, PayloadError, PushNotificationError
from .fcm import FCMBatchResponse, FCMBatchResponseParser, FCMDispatcher, FCMPayload, FCMResponse
from .jpush import (
    JPushBatchResponseParser,
    JPushDispatcher,
    JPushMessagePayload,
    JPushNotification3rdPayload,
    JPushNotificationPayload,
    JPushReportParser,
    JPushResponse,
)

# Memory adapters for testing
from .memory.fake import InMemoryTransport
from .merger import BatchResponseMerger
from .ports.logger import IDiagnosticLogger
from .ports.parser import IResponseParser
from .ports.response import INotificationResponse
from .ports.transport import ITransport, RawHttpResponse
from .report import CumulativeReport, DeliveryReport
from .status import PushNotificationStatus
from .transport.httpx import HttpxTransport
from .wns import WNSDispatcher, WNSRawPayload, WNSResponse, WNSResponseParser, WNSToastPayload

__all__ = [
    "PushNotificationStatus",
    "DeliveryReport",
    "CumulativeReport",
    "BatchResponseMerger",
    "PushNotificationError",
    "MalformedResponseError",
    "PayloadError",
    "IDiagnosticLogger",
    "IResponseParser",
    "INotificationResponse",
    "ITransport",
    "RawHttpResponse",
    "HttpxTransport",
    "InMemoryTransport",
    "APNSPayload",
    "APNSResponse",
    "APNSResponseParser",
    "ApnsRawResponse",
    "FCMBatchResponse",
    "FCMBatchResponseParser",
    "FCMDispatcher",
    "FCMPayload",
    "FCMResponse",
    "WNSDispatcher",
    "WNSRawPayload",
    "WNSResponse",
    "WNSResponseParser",
    "WNSToastPayload",
    "JPushBatchResponseParser",
    "JPushDispatcher",
    "JPushMessagePayload",
    "JPushNotification3rdPayload",
    "JPushNotificationPayload",
    "JPushReportParser",
    "JPushResponse",
    "EmailDispatcher",
    "EmailPayload",
    "EmailResponse",
    "EmailResponseParser",
]

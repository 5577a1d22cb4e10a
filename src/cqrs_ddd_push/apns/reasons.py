"""APNS error classification tables.

Both tables are plain data. Parsers accept overrides, so new provider
reasons can be classified without touching parsing logic.
"""

from __future__ import annotations

from types import MappingProxyType

from ..status import PushNotificationStatus

_TEMPORARY = PushNotificationStatus.TEMPORARY_ERROR
_INVALID = PushNotificationStatus.INVALID_ENDPOINT
_ERROR = PushNotificationStatus.ERROR

# HTTP/2 provider API ``reason`` strings.
DEFAULT_REASON_STATUSES = MappingProxyType(
    {
        "IdleTimeout": _TEMPORARY,
        "ExpiredProviderToken": _TEMPORARY,
        "TooManyProviderTokenUpdates": _TEMPORARY,
        "TooManyRequests": _TEMPORARY,
        "InternalServerError": _TEMPORARY,
        "ServiceUnavailable": _TEMPORARY,
        "Shutdown": _TEMPORARY,
        "BadDeviceToken": _INVALID,
        "DeviceTokenNotForTopic": _INVALID,
        "Unregistered": _INVALID,
        "BadCollapseId": _ERROR,
        "BadExpirationDate": _ERROR,
        "BadMessageId": _ERROR,
        "BadPriority": _ERROR,
        "BadTopic": _ERROR,
        "DuplicateHeaders": _ERROR,
        "InvalidPushType": _ERROR,
        "MissingDeviceToken": _ERROR,
        "MissingTopic": _ERROR,
        "PayloadEmpty": _ERROR,
        "PayloadTooLarge": _ERROR,
        "TopicDisallowed": _ERROR,
        "BadCertificate": _ERROR,
        "BadCertificateEnvironment": _ERROR,
        "Forbidden": _ERROR,
        "InvalidProviderToken": _ERROR,
        "MissingProviderToken": _ERROR,
        "BadPath": _ERROR,
        "MethodNotAllowed": _ERROR,
    }
)

# Legacy binary protocol status codes (plus 999 for errors the client could not classify).
DEFAULT_CODE_STATUSES = MappingProxyType(
    {
        1: _TEMPORARY,  # Processing error
        2: _ERROR,  # Missing device token
        3: _ERROR,  # Missing topic
        4: _ERROR,  # Missing payload
        5: _INVALID,  # Invalid token size
        6: _ERROR,  # Invalid topic size
        7: _ERROR,  # Invalid payload size
        8: _INVALID,  # Invalid token
        999: _TEMPORARY,
    }
)

# statusCode values from this one up carry an HTTP/2 JSON body.
HTTP_STATUS_THRESHOLD = 400

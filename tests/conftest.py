"""Test configuration for cqrs-ddd-push."""

from unittest.mock import MagicMock

import pytest

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def diagnostic_logger():
    """Mock diagnostic logger recording warning calls."""
    return MagicMock()


@pytest.fixture
def transport():
    """In-memory transport with no queued responses."""
    from cqrs_ddd_push.memory.fake import InMemoryTransport

    return InMemoryTransport()


class Message:
    """Queued APNS message carrying its recipient token."""

    def __init__(self, recipient: str):
        self.recipient = recipient


@pytest.fixture
def apns_error():
    """Factory for APNS client error queue entries."""

    def make(recipient: str, status_code: int, status_message: str, identifier: int = 100):
        return {
            "MESSAGE": Message(recipient),
            "BINARY_NOTIFICATION": "blablibla",
            "ERRORS": [
                {
                    "command": 8,
                    "statusCode": status_code,
                    "identifier": identifier,
                    "time": 1465997381,
                    "statusMessage": status_message,
                }
            ],
        }

    return make

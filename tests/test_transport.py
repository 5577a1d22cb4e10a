"""Tests for the httpx transport."""

import httpx
import pytest

from cqrs_ddd_push.status import PushNotificationStatus
from cqrs_ddd_push.transport.httpx import HttpxTransport
from cqrs_ddd_push.wns.dispatcher import WNSDispatcher
from cqrs_ddd_push.wns.payload import WNSToastPayload


@pytest.mark.asyncio
async def test_httpx_transport_returns_raw_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        seen["body"] = request.content
        return httpx.Response(410, headers={"X-WNS-Status": "dropped"}, text="gone")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = HttpxTransport(client=client)
        raw = await transport.post(
            "https://push.example.com/send",
            '{"a": 1}',
            headers={"Content-Type": "application/json"},
            auth=("user", "pass"),
        )

    assert raw.url == "https://push.example.com/send"
    assert raw.status_code == 410
    assert raw.header("x-wns-status") == "dropped"
    assert raw.body == "gone"
    assert seen["body"] == b'{"a": 1}'
    assert seen["headers"]["user-agent"] == "cqrs-ddd-push/0.1.0"
    assert seen["headers"]["authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_httpx_transport_connection_error_has_no_status():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        raw = await HttpxTransport(client=client).post("https://push.example.com/send", "{}")

    assert raw.status_code is None
    assert raw.body == ""


@pytest.mark.asyncio
async def test_httpx_transport_invalid_url_has_no_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        raw = await HttpxTransport(client=client).post("https://bad\x00host/", "{}")

    assert raw.status_code is None
    assert raw.url == "https://bad\x00host/"


@pytest.mark.asyncio
async def test_wns_dispatcher_isolates_unreachable_channel():
    """Test one unusable channel URI does not cost the other channels their results."""
    good = "https://db5.notify.windows.com/?token=good"
    bad = "https://bad\x00host/"

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"X-WNS-Status": "received"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        dispatcher = WNSDispatcher(HttpxTransport(client=client), "token")
        responses = await dispatcher.push(WNSToastPayload().set_title("Hi"), [good, bad])

    assert responses[good].get_status(good) is PushNotificationStatus.SUCCESS
    assert responses[bad].get_status(bad) is PushNotificationStatus.ERROR

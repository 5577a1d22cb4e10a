"""Tests for the provider dispatchers using the in-memory transport."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cqrs_ddd_push.email.dispatcher import EmailDispatcher
from cqrs_ddd_push.email.payload import EmailPayload
from cqrs_ddd_push.fcm.dispatcher import FCM_SEND_URL, FCMDispatcher
from cqrs_ddd_push.fcm.payload import FCMPayload
from cqrs_ddd_push.jpush.dispatcher import JPUSH_PUSH_URL, JPUSH_REPORT_URL, JPushDispatcher
from cqrs_ddd_push.jpush.payload import JPushNotificationPayload
from cqrs_ddd_push.ports.transport import RawHttpResponse
from cqrs_ddd_push.status import PushNotificationStatus
from cqrs_ddd_push.wns.dispatcher import WNSDispatcher
from cqrs_ddd_push.wns.payload import WNSPayload, WNSToastPayload

S = PushNotificationStatus


def _fcm_ok(*results):
    return RawHttpResponse(url=FCM_SEND_URL, status_code=200, body=json.dumps({"results": list(results)}))


@pytest.mark.asyncio
async def test_fcm_dispatcher_batches_and_merges(transport, diagnostic_logger):
    """Test endpoints are split into batches and every batch is merged."""
    transport.queue(
        _fcm_ok({"message_id": "1"}, {"error": "NotRegistered"}),
        RawHttpResponse(url=FCM_SEND_URL, status_code=503),
    )
    dispatcher = FCMDispatcher(
        transport, auth_token="secret", batch_size=2, diagnostic_logger=diagnostic_logger
    )

    response = await dispatcher.push(FCMPayload().set_data({"k": "v"}), ["a", "b", "c"])

    assert dict(response.report) == {
        "a": S.SUCCESS,
        "b": S.INVALID_ENDPOINT,
        "c": S.TEMPORARY_ERROR,
    }
    transport.assert_posted(FCM_SEND_URL, count=2)
    first, second = transport.sent_requests
    assert json.loads(first.body)["registration_ids"] == ["a", "b"]
    assert json.loads(second.body)["registration_ids"] == ["c"]
    assert first.headers["Authorization"] == "key=secret"


@pytest.mark.asyncio
async def test_fcm_dispatcher_without_endpoints_sends_nothing(transport):
    response = await FCMDispatcher(transport).push(FCMPayload(), [])

    assert len(response.report) == 0
    assert transport.sent_requests == []


@pytest.mark.parametrize("batch_size", [0, 1001])
def test_fcm_dispatcher_rejects_invalid_batch_size(transport, batch_size):
    with pytest.raises(ValueError):
        FCMDispatcher(transport, batch_size=batch_size)


@pytest.mark.asyncio
async def test_wns_dispatcher_posts_to_each_channel(transport, diagnostic_logger):
    transport.queue(
        RawHttpResponse(url="https://wns/1", status_code=200, headers={"X-WNS-Status": "received"}),
        RawHttpResponse(url="https://wns/2", status_code=410),
    )
    dispatcher = WNSDispatcher(transport, "token", diagnostic_logger)

    responses = await dispatcher.push(
        WNSToastPayload().set_title("Hi"), ["https://wns/1", "https://wns/2"]
    )

    assert responses["https://wns/1"].get_status("https://wns/1") is S.SUCCESS
    assert responses["https://wns/2"].get_status("https://wns/2") is S.INVALID_ENDPOINT
    headers = transport.sent_requests[0].headers
    assert headers["Authorization"] == "Bearer token"
    assert headers["X-WNS-Type"] == "wns/toast"


@pytest.mark.asyncio
async def test_wns_dispatcher_requires_notification_type(transport):
    with pytest.raises(ValueError):
        await WNSDispatcher(transport, "token").push(WNSPayload(), ["https://wns/1"])


@pytest.mark.asyncio
async def test_jpush_dispatcher_refines_with_report(transport, diagnostic_logger):
    transport.queue(
        RawHttpResponse(url=JPUSH_PUSH_URL, status_code=200, body='{"sendno": "0", "msg_id": 123}'),
        RawHttpResponse(
            url=JPUSH_REPORT_URL,
            status_code=200,
            body='{"r1": {"status": 0}, "r2": {"status": 2}}',
        ),
    )
    dispatcher = JPushDispatcher(transport, "key", "secret", diagnostic_logger=diagnostic_logger)

    response = await dispatcher.push(
        JPushNotificationPayload().set_body("B"), ["r1", "r2"], fetch_report=True
    )

    assert dict(response.report) == {"r1": S.SUCCESS, "r2": S.INVALID_ENDPOINT}
    push_request, report_request = transport.sent_requests
    assert push_request.auth == ("key", "secret")
    assert json.loads(push_request.body)["audience"] == {"registration_id": ["r1", "r2"]}
    assert json.loads(report_request.body) == {"msg_id": 123, "registration_ids": ["r1", "r2"]}


@pytest.mark.asyncio
async def test_jpush_dispatcher_keeps_push_result_when_report_unavailable(transport):
    transport.queue(
        RawHttpResponse(url=JPUSH_PUSH_URL, status_code=200, body='{"msg_id": "9"}'),
        RawHttpResponse(url=JPUSH_REPORT_URL, status_code=500),
    )
    dispatcher = JPushDispatcher(transport, "key", "secret")

    response = await dispatcher.push(JPushNotificationPayload(), ["r1"], fetch_report=True)

    assert dict(response.report) == {"r1": S.SUCCESS}
    assert json.loads(transport.sent_requests[1].body)["msg_id"] == 9


@pytest.mark.asyncio
async def test_jpush_dispatcher_skips_report_for_rejected_push(transport, diagnostic_logger):
    transport.queue(RawHttpResponse(url=JPUSH_PUSH_URL, status_code=401))
    dispatcher = JPushDispatcher(transport, "key", "secret", diagnostic_logger=diagnostic_logger)

    response = await dispatcher.push(JPushNotificationPayload(), ["r1"], fetch_report=True)

    assert response.get_status("r1") is S.ERROR
    transport.assert_posted(JPUSH_REPORT_URL, count=0)


@pytest.mark.asyncio
async def test_jpush_dispatcher_rejects_large_audience(transport):
    endpoints = [f"r{i}" for i in range(1001)]

    with pytest.raises(ValueError):
        await JPushDispatcher(transport, "key", "secret").push(JPushNotificationPayload(), endpoints)


@pytest.fixture
def smtp():
    """Patched aiosmtplib.SMTP yielding an AsyncMock session."""
    session = AsyncMock()
    smtp_class = MagicMock()
    smtp_class.return_value.__aenter__.return_value = session
    with patch("aiosmtplib.SMTP", smtp_class):
        yield smtp_class, session


@pytest.mark.asyncio
async def test_email_dispatcher_records_per_recipient_outcome(smtp, diagnostic_logger):
    import aiosmtplib

    smtp_class, session = smtp
    session.send_message.side_effect = [None, aiosmtplib.SMTPException("mailbox unavailable")]
    dispatcher = EmailDispatcher(
        "smtp.example.com",
        "noreply@example.com",
        username="user",
        password="pass",
        diagnostic_logger=diagnostic_logger,
    )

    response = await dispatcher.push(
        EmailPayload().set_subject("Hi").set_body("Hello"), ["a@example.com", "b@example.com"]
    )

    assert response.get_status("a@example.com") is S.SUCCESS
    assert response.get_status("b@example.com") is S.ERROR
    assert smtp_class.call_args.kwargs["start_tls"] is True
    session.starttls.assert_not_awaited()
    session.login.assert_awaited_once_with("user", "pass")
    assert session.send_message.await_count == 2


@pytest.mark.asyncio
async def test_email_dispatcher_session_failure_marks_all_errors(smtp, diagnostic_logger):
    smtp_class, _ = smtp
    smtp_class.return_value.__aenter__.side_effect = OSError("connection refused")
    dispatcher = EmailDispatcher(
        "smtp.example.com", "noreply@example.com", diagnostic_logger=diagnostic_logger
    )

    response = await dispatcher.push(EmailPayload().set_body("Hello"), ["a@example.com"])

    assert response.get_status("a@example.com") is S.ERROR
    diagnostic_logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_email_dispatcher_without_tls_disables_starttls(smtp):
    smtp_class, session = smtp
    dispatcher = EmailDispatcher("smtp.example.com", "noreply@example.com", use_tls=False)

    response = await dispatcher.push(EmailPayload().set_body("Hello"), ["a@example.com"])

    assert response.get_status("a@example.com") is S.SUCCESS
    assert smtp_class.call_args.kwargs["start_tls"] is False
    session.login.assert_not_awaited()

"""Tests for WNS response parsing."""

import pytest

from cqrs_ddd_push.exceptions import MalformedResponseError
from cqrs_ddd_push.ports.transport import RawHttpResponse
from cqrs_ddd_push.status import PushNotificationStatus
from cqrs_ddd_push.wns.parser import FAILURE_TEMPLATE, WNSResponseParser
from cqrs_ddd_push.wns.response import WNSResponse

S = PushNotificationStatus
URL = "https://db5.notify.windows.com/?token=abc"


def _response(status_code, wns_status="received"):
    return RawHttpResponse(
        url=URL,
        status_code=status_code,
        headers={
            "X-WNS-Status": wns_status,
            "X-WNS-DeviceConnectionStatus": "connected",
            "X-WNS-Error-Description": "Some error",
            "X-WNS-Debug-Trace": "trace-123",
        },
    )


def test_received_is_success_without_log(diagnostic_logger):
    response = WNSResponse.from_raw(_response(200), diagnostic_logger)

    assert response.get_status(URL) is S.SUCCESS
    diagnostic_logger.warning.assert_not_called()


@pytest.mark.parametrize(
    ("status_code", "wns_status", "expected"),
    [
        (200, "channelthrottled", S.TEMPORARY_ERROR),
        (200, "dropped", S.CLIENT_ERROR),
        (404, "dropped", S.INVALID_ENDPOINT),
        (410, "dropped", S.INVALID_ENDPOINT),
        (400, "dropped", S.ERROR),
        (401, "dropped", S.ERROR),
        (403, "dropped", S.ERROR),
        (405, "dropped", S.ERROR),
        (413, "dropped", S.ERROR),
        (406, "channelthrottled", S.TEMPORARY_ERROR),
        (500, "dropped", S.TEMPORARY_ERROR),
        (503, "dropped", S.TEMPORARY_ERROR),
        (418, "dropped", S.UNKNOWN),
    ],
)
def test_failures_map_and_log_headers(diagnostic_logger, status_code, wns_status, expected):
    """Test every non-success emits exactly one warning with all header fields."""
    response = WNSResponse.from_raw(_response(status_code, wns_status), diagnostic_logger)

    assert response.get_status(URL) is expected
    diagnostic_logger.warning.assert_called_once_with(
        FAILURE_TEMPLATE,
        {
            "endpoint": URL,
            "nstatus": wns_status,
            "dstatus": "connected",
            "error_description": "Some error",
            "error_trace": "trace-123",
        },
    )


def test_header_lookup_is_case_insensitive(diagnostic_logger):
    raw = RawHttpResponse(url=URL, status_code=200, headers={"x-wns-status": "received"})

    assert WNSResponse.from_raw(raw, diagnostic_logger).get_status(URL) is S.SUCCESS


def test_no_status_code_is_error(diagnostic_logger):
    response = WNSResponse.from_raw(RawHttpResponse.failed(URL), diagnostic_logger)

    assert response.get_status(URL) is S.ERROR
    diagnostic_logger.warning.assert_called_once_with(
        FAILURE_TEMPLATE,
        {
            "endpoint": URL,
            "nstatus": None,
            "dstatus": None,
            "error_description": None,
            "error_trace": None,
        },
    )


def test_other_endpoint_is_unknown(diagnostic_logger):
    """Test the response only answers for the channel URI it was built for."""
    response = WNSResponse.from_raw(_response(404, "dropped"), diagnostic_logger)

    assert response.get_status("https://other.example") is S.UNKNOWN
    assert response.get_status(URL) is S.INVALID_ENDPOINT


def test_parser_requires_single_endpoint(diagnostic_logger):
    with pytest.raises(MalformedResponseError):
        WNSResponseParser().parse(_response(200), ["a", "b"], diagnostic_logger)


def test_parser_report_covers_its_endpoint(diagnostic_logger):
    report = WNSResponseParser().parse(_response(200), ["channel"], diagnostic_logger)

    assert list(report) == ["channel"]

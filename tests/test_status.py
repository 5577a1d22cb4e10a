"""Tests for the delivery status taxonomy."""

from cqrs_ddd_push.status import PushNotificationStatus


def test_statuses_are_ordered_best_to_worst():
    """Test the declared order drives severity."""
    assert [s.name for s in PushNotificationStatus] == [
        "SUCCESS",
        "UNKNOWN",
        "TEMPORARY_ERROR",
        "CLIENT_ERROR",
        "ERROR",
        "INVALID_ENDPOINT",
    ]
    assert PushNotificationStatus.SUCCESS.severity == 0
    assert PushNotificationStatus.INVALID_ENDPOINT.severity == 5


def test_worst_picks_most_severe():
    """Test worst() returns the status ranked last."""
    assert (
        PushNotificationStatus.worst(
            PushNotificationStatus.ERROR,
            PushNotificationStatus.INVALID_ENDPOINT,
            PushNotificationStatus.TEMPORARY_ERROR,
        )
        is PushNotificationStatus.INVALID_ENDPOINT
    )
    assert (
        PushNotificationStatus.worst(PushNotificationStatus.SUCCESS, PushNotificationStatus.UNKNOWN)
        is PushNotificationStatus.UNKNOWN
    )


def test_worst_without_statuses_is_unknown():
    assert PushNotificationStatus.worst() is PushNotificationStatus.UNKNOWN

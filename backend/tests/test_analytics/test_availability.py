from datetime import datetime, timedelta, timezone

from app.analytics.availability import check_availability

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


def test_event_that_ended_yesterday_is_available():
    availability = check_availability(NOW - timedelta(days=1), NOW)
    assert availability.event_ended
    assert availability.allowed
    assert availability.days_remaining == 0


def test_event_ending_in_three_days_is_rejected_unless_forced():
    end = NOW + timedelta(days=3)

    availability = check_availability(end, NOW)
    assert not availability.event_ended
    assert not availability.near_end
    assert not availability.allowed
    assert availability.days_remaining == 3

    forced = check_availability(end, NOW, force=True)
    assert forced.allowed
    assert not forced.available


def test_event_ending_within_a_day_is_near_end():
    availability = check_availability(NOW + timedelta(hours=23), NOW)
    assert availability.near_end
    assert availability.allowed
    assert availability.days_remaining == 1


def test_exactly_one_day_out_is_not_near_end():
    availability = check_availability(NOW + timedelta(hours=24), NOW)
    assert not availability.near_end
    assert not availability.allowed


def test_naive_end_date_is_treated_as_utc():
    availability = check_availability(datetime(2026, 6, 14, 12, 0), NOW)
    assert availability.event_ended
    assert availability.end_date.tzinfo is timezone.utc


def test_custom_window():
    availability = check_availability(NOW + timedelta(hours=30), NOW, window=timedelta(hours=48))
    assert availability.near_end

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.analytics.alerts import analyze_alerts
from app.events.models import Alert

DAY_ONE = datetime(2026, 5, 1, 10, 0, tzinfo=timezone.utc)


def make_alert(
    status="new",
    severity="medium",
    type="issue",
    category="general",
    created_at=DAY_ONE,
    response_minutes=None,
):
    resolved_at = created_at + timedelta(minutes=response_minutes) if response_minutes is not None else None
    return Alert(
        id=uuid.uuid4(),
        event_id=uuid.uuid4(),
        type=type,
        severity=severity,
        category=category,
        status=status,
        created_at=created_at,
        resolved_at=resolved_at,
    )


def test_empty_alerts():
    result = analyze_alerts([])
    assert result["total"] == 0
    assert result["resolution_rate"] == 0
    assert result["average_response_time_minutes"] == 0
    assert result["critical_response_time_minutes"] == 0
    assert result["timeline"] == []
    assert result["top_categories"] == []


def test_average_response_time_is_floored_mean():
    alerts = [make_alert("resolved", response_minutes=m) for m in (10, 20, 30, 40, 50)]
    result = analyze_alerts(alerts)
    assert result["average_response_time_minutes"] == 30
    assert result["resolution_rate"] == pytest.approx(100)


def test_partial_minutes_are_floored():
    alerts = [make_alert("resolved", response_minutes=m) for m in (1, 2)]
    assert analyze_alerts(alerts)["average_response_time_minutes"] == 1


def test_critical_response_time_tracked_separately():
    alerts = [
        make_alert("resolved", severity="critical", response_minutes=4),
        make_alert("resolved", severity="critical", response_minutes=8),
        make_alert("resolved", severity="low", response_minutes=60),
    ]
    result = analyze_alerts(alerts)
    assert result["critical_response_time_minutes"] == 6
    assert result["average_response_time_minutes"] == 24


def test_resolved_without_timestamp_counts_toward_rate_but_not_time():
    alerts = [
        make_alert("resolved"),
        make_alert("resolved", response_minutes=12),
        make_alert("new"),
        make_alert("ignored"),
    ]
    result = analyze_alerts(alerts)
    assert result["resolution_rate"] == pytest.approx(50)
    assert result["average_response_time_minutes"] == 12
    assert result["status_counts"]["ignored"] == 1


def test_counts_by_type_severity_and_category():
    alerts = [
        make_alert(type="sos", severity="critical", category="emergency"),
        make_alert(type="sentiment", severity="low", category="queue"),
        make_alert(type="sentiment", severity="low", category="queue"),
    ]
    result = analyze_alerts(alerts)
    assert result["type_counts"]["sos"] == 1
    assert result["type_counts"]["sentiment"] == 2
    assert result["severity_counts"] == {"low": 2, "medium": 0, "high": 0, "critical": 1}
    assert result["top_categories"][0]["category"] == "queue"
    assert result["top_categories"][0]["percentage"] == pytest.approx(200 / 3)


def test_timeline_buckets_by_utc_day_in_order():
    day_two = DAY_ONE + timedelta(days=1)
    alerts = [
        make_alert(created_at=day_two, type="trend"),
        make_alert("resolved", created_at=DAY_ONE, severity="high", response_minutes=5),
        make_alert(created_at=DAY_ONE + timedelta(hours=3)),
    ]
    timeline = analyze_alerts(alerts)["timeline"]

    assert [d["date"] for d in timeline] == ["2026-05-01", "2026-05-02"]
    assert timeline[0]["count"] == 2
    assert timeline[0]["resolved"] == 1
    assert timeline[0]["by_severity"]["high"] == 1
    assert timeline[1]["by_type"]["trend"] == 1


def test_timeline_uses_utc_for_offset_timestamps():
    late_evening_pacific = datetime(2026, 5, 1, 20, 0, tzinfo=timezone(timedelta(hours=-7)))
    timeline = analyze_alerts([make_alert(created_at=late_evening_pacific)])["timeline"]
    assert timeline[0]["date"] == "2026-05-02"

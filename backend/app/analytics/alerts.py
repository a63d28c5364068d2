from collections.abc import Iterable

from app.analytics.stats import floor_minutes, percentage, ranked_counts
from app.events.models import Alert
from app.models.base import ensure_utc, utc_day

ALERT_TYPES = ("sos", "sentiment", "issue", "trend", "system")
SEVERITIES = ("low", "medium", "high", "critical")
ALERT_STATUSES = ("new", "acknowledged", "inProgress", "resolved", "ignored")
TOP_CATEGORIES = 5


def _response_ms(alert: Alert) -> float:
    return (ensure_utc(alert.resolved_at) - ensure_utc(alert.created_at)).total_seconds() * 1000


def analyze_alerts(alerts: Iterable[Alert]) -> dict:
    """Counts, response times and a per-day timeline for an event's alerts."""
    type_counts = {t: 0 for t in ALERT_TYPES}
    severity_counts = {s: 0 for s in SEVERITIES}
    status_counts = {s: 0 for s in ALERT_STATUSES}
    category_counts: dict[str, int] = {}
    by_day: dict[str, dict] = {}

    total = 0
    total_response_ms = 0.0
    responded = 0
    critical_response_ms = 0.0
    critical_responded = 0

    for alert in alerts:
        total += 1
        type_counts[alert.type] += 1
        severity_counts[alert.severity] += 1
        status_counts[alert.status] += 1
        category_counts[alert.category] = category_counts.get(alert.category, 0) + 1

        if alert.status == "resolved" and alert.resolved_at:
            response_ms = _response_ms(alert)
            total_response_ms += response_ms
            responded += 1
            if alert.severity == "critical":
                critical_response_ms += response_ms
                critical_responded += 1

        day = utc_day(alert.created_at)
        entry = by_day.get(day)
        if entry is None:
            entry = by_day[day] = {
                "date": day,
                "count": 0,
                "resolved": 0,
                "by_type": {t: 0 for t in ALERT_TYPES},
                "by_severity": {s: 0 for s in SEVERITIES},
            }
        entry["count"] += 1
        entry["by_type"][alert.type] += 1
        entry["by_severity"][alert.severity] += 1
        if alert.status == "resolved":
            entry["resolved"] += 1

    average_ms = total_response_ms / responded if responded else 0.0
    critical_ms = critical_response_ms / critical_responded if critical_responded else 0.0

    return {
        "total": total,
        "type_counts": type_counts,
        "severity_counts": severity_counts,
        "category_counts": category_counts,
        "status_counts": status_counts,
        "top_categories": ranked_counts(category_counts, "category", total, limit=TOP_CATEGORIES),
        "resolution_rate": percentage(status_counts["resolved"], total),
        "average_response_time_minutes": floor_minutes(average_ms),
        "critical_response_time_minutes": floor_minutes(critical_ms),
        "timeline": [by_day[day] for day in sorted(by_day)],
    }

from collections.abc import Iterable

from app.analytics.stats import floor_minutes, percentage, ranked_counts
from app.events.models import Issue
from app.models.base import ensure_utc

SEVERITIES = ("low", "medium", "high", "critical")
ISSUE_STATUSES = ("detected", "confirmed", "inProgress", "resolved", "falsePositive")
TOP_TYPES = 5
TOP_LOCATIONS = 5


def analyze_issues(issues: Iterable[Issue]) -> dict:
    """Issue counts and resolution outcomes; false positives count as closed."""
    type_counts: dict[str, int] = {}
    severity_counts = {s: 0 for s in SEVERITIES}
    status_counts = {s: 0 for s in ISSUE_STATUSES}
    location_counts: dict[str, int] = {}

    total = 0
    total_resolution_ms = 0.0
    resolved_with_time = 0

    for issue in issues:
        total += 1
        type_counts[issue.type] = type_counts.get(issue.type, 0) + 1
        severity_counts[issue.severity] += 1
        status_counts[issue.status] += 1

        if issue.location:
            location_counts[issue.location] = location_counts.get(issue.location, 0) + 1

        if issue.status == "resolved" and issue.resolved_at:
            elapsed = ensure_utc(issue.resolved_at) - ensure_utc(issue.created_at)
            total_resolution_ms += elapsed.total_seconds() * 1000
            resolved_with_time += 1

    closed = status_counts["resolved"] + status_counts["falsePositive"]
    average_ms = total_resolution_ms / resolved_with_time if resolved_with_time else 0.0

    return {
        "total": total,
        "type_counts": type_counts,
        "severity_counts": severity_counts,
        "status_counts": status_counts,
        "location_counts": location_counts,
        "top_issue_types": ranked_counts(type_counts, "type", total, limit=TOP_TYPES),
        "top_locations": ranked_counts(location_counts, "location", total, limit=TOP_LOCATIONS),
        "resolution_rate": percentage(closed, total),
        "average_resolution_time_minutes": floor_minutes(average_ms),
        "unresolved_count": total - closed,
    }

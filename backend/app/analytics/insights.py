"""Narrative insights derived from the aggregated report sections.

Each rule looks at the aggregates and returns one insight or None. Rules run
in ``INSIGHT_RULES`` order and the output keeps that order.
"""

import math
from datetime import date, timedelta

from app.analytics.stats import round_half_up
from app.models.base import ensure_utc


def _insight(kind: str, title: str, content: str) -> dict:
    return {"type": kind, "title": title, "content": content}


def _event_scale(event, feedback, alerts, issues, sentiment):
    span = ensure_utc(event.end_date) - ensure_utc(event.start_date)
    days = math.ceil(span / timedelta(days=1))
    return _insight(
        "info",
        "Event Scale",
        f"{event.name} ran for {days} days with {feedback['total']} pieces of feedback collected.",
    )


def _reception(event, feedback, alerts, issues, sentiment):
    pct = feedback["sentiment_percentages"]
    positive = round_half_up(pct["positive"])
    negative = round_half_up(pct["negative"])

    if pct["positive"] > 75:
        return _insight(
            "positive",
            "Overwhelmingly Positive Feedback",
            f"The event received exceptionally positive feedback with {positive}% positive sentiment.",
        )
    if pct["positive"] > 60:
        return _insight(
            "positive",
            "Generally Positive Reception",
            f"The event was well-received with {positive}% positive feedback.",
        )
    if pct["negative"] > 50:
        return _insight(
            "negative",
            "Predominantly Negative Reception",
            f"The event faced significant challenges with {negative}% negative feedback.",
        )
    return _insight(
        "neutral",
        "Mixed Reception",
        f"The event received mixed feedback with {positive}% positive, "
        f"{round_half_up(pct['neutral'])}% neutral, and {negative}% negative sentiment.",
    )


def _primary_issues(event, feedback, alerts, issues, sentiment):
    top = feedback["top_issues"]
    if not top:
        return None
    first = top[0]
    if len(top) > 1:
        runner_up = f"\"{top[1]['issue']}\" ({round_half_up(top[1]['percentage'])}%)"
    else:
        runner_up = "no other significant issues"
    return _insight(
        "warning",
        "Primary Reported Issues",
        f"The most common issue type was \"{first['issue']}\" "
        f"({round_half_up(first['percentage'])}% of negative feedback), followed by {runner_up}.",
    )


def _alert_management(event, feedback, alerts, issues, sentiment):
    if alerts["total"] == 0:
        return None
    rate = alerts["resolution_rate"]
    if rate > 90:
        return _insight(
            "positive",
            "Excellent Alert Management",
            f"The team resolved {round_half_up(rate)}% of alerts with an average response time "
            f"of {alerts['average_response_time_minutes']} minutes.",
        )
    if rate < 50:
        return _insight(
            "negative",
            "Alert Management Challenges",
            f"Only {round_half_up(rate)}% of alerts were resolved, "
            f"with {alerts['status_counts']['new']} alerts left unaddressed.",
        )
    return None


def _critical_issues(event, feedback, alerts, issues, sentiment):
    critical = issues["severity_counts"]["critical"]
    if critical <= 0:
        return None
    return _insight(
        "warning",
        "Critical Issues Detected",
        f"{critical} critical issues were detected during the event.",
    )


def _engagement_pattern(event, feedback, alerts, issues, sentiment):
    days = sentiment["daily_volume"]
    if len(days) <= 1:
        return None

    peak = days[0]
    for day in days[1:]:
        if day["total"] > peak["total"]:
            peak = day

    if peak["date"] == days[0]["date"]:
        shape = "Engagement was highest on the first day and declined thereafter."
    elif peak["date"] == days[-1]["date"]:
        shape = "Engagement built gradually and peaked on the final day."
    else:
        shape = "Engagement peaked in the middle of the event."

    peak_day = date.fromisoformat(peak["date"]).strftime("%B %d, %Y")
    return _insight(
        "info",
        "Engagement Pattern",
        f"Peak engagement occurred on {peak_day} with {peak['total']} feedback items. {shape}",
    )


def _sentiment_shift(event, feedback, alerts, issues, sentiment):
    if not sentiment["sentiment_changes"]:
        return None
    change = sentiment["sentiment_changes"][0]
    start = change["from_period"].strftime("%Y-%m-%d %H:%M UTC")
    end = change["to_period"].strftime("%Y-%m-%d %H:%M UTC")
    return _insight(
        "warning" if change["direction"] == "negative" else "positive",
        "Significant Sentiment Shift",
        f"A {abs(change['change_pct'])}% shift toward {change['direction']} sentiment "
        f"was detected between {start} and {end}.",
    )


def _feedback_channels(event, feedback, alerts, issues, sentiment):
    shares = feedback["source_percentages"]
    if len(shares) <= 1:
        return None
    top_source, top_share = sorted(shares.items(), key=lambda kv: kv[1], reverse=True)[0]
    return _insight(
        "info",
        "Feedback Channels",
        f"{round_half_up(top_share)}% of feedback came from {top_source}, making it the most active channel.",
    )


INSIGHT_RULES = (
    _event_scale,
    _reception,
    _primary_issues,
    _alert_management,
    _critical_issues,
    _engagement_pattern,
    _sentiment_shift,
    _feedback_channels,
)


def generate_insights(event, feedback: dict, alerts: dict, issues: dict, sentiment: dict) -> list[dict]:
    insights = []
    for rule in INSIGHT_RULES:
        insight = rule(event, feedback, alerts, issues, sentiment)
        if insight is not None:
            insights.append(insight)
    return insights

"""Sentiment trend analysis over the hourly and daily sentiment buckets of an event.

Hourly buckets drive peak and change-point detection. Daily buckets fill a
per-day volume table that covers every calendar day of the event, with days
that have no data kept as explicit zero rows.

Only "significant" hourly buckets (at least ``SIGNIFICANT_PERIOD_MIN_TOTAL``
items) take part in ratio-based peak detection and change-point detection, so
a bucket holding two items cannot register as a 100% negative spike.
"""

import math
from collections.abc import Iterable
from datetime import datetime, timedelta

from app.analytics.stats import percentage, round_decimal
from app.events.models import SentimentRecord
from app.models.base import ensure_utc, utc_day

SIGNIFICANT_PERIOD_MIN_TOTAL = 5
CHANGE_THRESHOLD_PCT = 15
MAX_SENTIMENT_CHANGES = 5


def event_day_count(start_date: datetime, end_date: datetime) -> int:
    span = ensure_utc(end_date) - ensure_utc(start_date)
    return math.ceil(span / timedelta(days=1)) + 1


def _timeline_point(record: SentimentRecord) -> dict:
    total = record.total_count
    return {
        "timestamp": ensure_utc(record.timestamp),
        "positive": record.positive_count,
        "neutral": record.neutral_count,
        "negative": record.negative_count,
        "total": total,
        "sentiment": {
            "positive": percentage(record.positive_count, total),
            "neutral": percentage(record.neutral_count, total),
            "negative": percentage(record.negative_count, total),
        },
    }


def _daily_volume(start_date: datetime, day_count: int, daily: list[dict]) -> list[dict]:
    start = ensure_utc(start_date)
    volume: dict[str, dict] = {}
    for i in range(day_count):
        day = utc_day(start + timedelta(days=i))
        volume[day] = {"date": day, "total": 0, "positive": 0, "neutral": 0, "negative": 0}

    for point in daily:
        entry = volume.get(utc_day(point["timestamp"]))
        if entry is None:
            continue
        for field in ("total", "positive", "neutral", "negative"):
            entry[field] = point[field]

    return list(volume.values())


def _peak_volume(periods: list[dict]) -> dict | None:
    peak = None
    peak_total = 0
    for period in periods:
        if period["total"] > peak_total:
            peak, peak_total = period, period["total"]
    return peak


def _peak_ratio(periods: list[dict], field: str) -> dict | None:
    """Period with the highest ``field`` share; None unless some share is above zero."""
    peak = None
    peak_ratio = 0.0
    for period in periods:
        ratio = period[field] / period["total"]
        if ratio > peak_ratio:
            peak, peak_ratio = period, ratio
    return peak


def detect_sentiment_changes(periods: list[dict]) -> list[dict]:
    """Consecutive-period swings in negative share of at least ``CHANGE_THRESHOLD_PCT`` points.

    Returns the first ``MAX_SENTIMENT_CHANGES`` swings in chronological order,
    not the largest ones.
    """
    changes = []
    for prev, curr in zip(periods, periods[1:]):
        delta = percentage(curr["negative"], curr["total"]) - percentage(prev["negative"], prev["total"])
        if abs(delta) >= CHANGE_THRESHOLD_PCT:
            changes.append({
                "from_period": prev["timestamp"],
                "to_period": curr["timestamp"],
                "change_pct": round_decimal(delta, 1),
                "direction": "negative" if delta > 0 else "positive",
            })
    return changes[:MAX_SENTIMENT_CHANGES]


def analyze_sentiment_trends(
    start_date: datetime,
    end_date: datetime,
    hourly_records: Iterable[SentimentRecord],
    daily_records: Iterable[SentimentRecord],
) -> dict:
    day_count = event_day_count(start_date, end_date)
    hourly = [_timeline_point(r) for r in hourly_records]
    daily = [_timeline_point(r) for r in daily_records]

    significant = [p for p in hourly if p["total"] >= SIGNIFICANT_PERIOD_MIN_TOTAL]

    return {
        "hourly": hourly,
        "daily": daily,
        "daily_volume": _daily_volume(start_date, day_count, daily),
        "peak_volume_period": _peak_volume(hourly),
        "peak_negative_period": _peak_ratio(significant, "negative"),
        "peak_positive_period": _peak_ratio(significant, "positive"),
        "sentiment_changes": detect_sentiment_changes(significant),
        "event_day_count": day_count,
    }

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal


def percentage(count: float, total: float) -> float:
    """Share of ``count`` in ``total`` on a 0-100 scale, 0 when there is nothing to divide by."""
    if total <= 0:
        return 0.0
    return (count / total) * 100


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores and ratios here round .5 upward.
    return math.floor(value + 0.5)


def round_decimal(value: float, ndigits: int) -> float:
    """Round to ``ndigits`` decimal places, halves away from zero (0.125 -> 0.13)."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def ranked_counts(
    counts: Mapping[str, int],
    label: str,
    total: int,
    limit: int = 5,
) -> list[dict]:
    """Top ``limit`` keys by count (ties keep first-seen order), each with its share of ``total``."""
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [
        {label: key, "count": count, "percentage": percentage(count, total)}
        for key, count in ranked[:limit]
    ]


def floor_minutes(milliseconds: float) -> int:
    return math.floor(milliseconds / 1000 / 60)

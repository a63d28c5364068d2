import pytest

from app.analytics.stats import clamp, floor_minutes, percentage, ranked_counts, round_decimal, round_half_up


def test_percentage_of_nothing_is_zero():
    assert percentage(3, 0) == 0.0
    assert percentage(1, 4) == 25.0


@pytest.mark.parametrize(
    "value,expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (-0.5, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "value,ndigits,expected",
    [
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (6.25, 1, 6.3),
        (0.375, 2, 0.38),
        (66.66666, 1, 66.7),
        # 2.675 is stored just below the halfway point
        (2.675, 2, 2.67),
    ],
)
def test_round_decimal_halves_go_up(value, ndigits, expected):
    assert round_decimal(value, ndigits) == expected


def test_clamp():
    assert clamp(140) == 100
    assert clamp(-3) == 0
    assert clamp(42.5) == 42.5


def test_floor_minutes():
    assert floor_minutes(119_999) == 1
    assert floor_minutes(0) == 0


def test_ranked_counts_keeps_first_seen_order_on_ties():
    ranked = ranked_counts({"audio": 2, "queue": 3, "video": 2}, "issue", total=7, limit=2)
    assert [r["issue"] for r in ranked] == ["queue", "audio"]

import pytest

from app.analytics.topk import BoundedTopK


def test_keeps_everything_until_full():
    buffer = BoundedTopK(3)
    assert buffer.offer(0.1, "a")
    assert buffer.offer(0.5, "b")
    assert len(buffer) == 2
    assert buffer.ranked() == ["b", "a"]


def test_replaces_lowest_only_when_strictly_better():
    buffer = BoundedTopK(2)
    buffer.offer(0.4, "a")
    buffer.offer(0.6, "b")

    assert not buffer.offer(0.4, "tie")
    assert not buffer.offer(0.1, "worse")
    assert buffer.offer(0.9, "better")
    assert buffer.ranked() == ["better", "b"]


def test_prefer_lower_keeps_most_negative():
    buffer = BoundedTopK(3, prefer_higher=False)
    for score, name in [(-0.2, "a"), (-0.9, "b"), (-0.5, "c"), (-0.1, "d"), (-0.95, "e")]:
        buffer.offer(score, name)
    assert buffer.ranked() == ["e", "b", "c"]


def test_first_worst_entry_is_replaced_on_ties():
    buffer = BoundedTopK(3)
    buffer.offer(0.2, "first-low")
    buffer.offer(0.8, "high")
    buffer.offer(0.2, "second-low")

    buffer.offer(0.5, "new")
    assert sorted(buffer.ranked()) == ["high", "new", "second-low"]


def test_never_exceeds_capacity():
    buffer = BoundedTopK(5)
    for i in range(100):
        buffer.offer(i / 100, i)
    assert len(buffer) == 5
    assert buffer.ranked() == [99, 98, 97, 96, 95]


def test_rejects_zero_capacity():
    with pytest.raises(ValueError):
        BoundedTopK(0)

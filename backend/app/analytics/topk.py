from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedTopK(Generic[T]):
    """Fixed-capacity buffer holding the best-scored items seen so far.

    Items are offered one at a time. Until the buffer is full every item is
    kept; after that the current worst entry (lowest score, or highest when
    ``prefer_higher`` is False) is replaced only when the incoming score is
    strictly better. Each offer is O(capacity), so a stream of n items costs
    O(n * capacity) and the full input is never sorted.
    """

    def __init__(self, capacity: int, prefer_higher: bool = True):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.prefer_higher = prefer_higher
        self._entries: list[tuple[float, T]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def _better(self, score: float, than: float) -> bool:
        return score > than if self.prefer_higher else score < than

    def _worst_index(self) -> int:
        worst = 0
        for i in range(1, len(self._entries)):
            if self._better(self._entries[worst][0], self._entries[i][0]):
                worst = i
        return worst

    def offer(self, score: float, item: T) -> bool:
        """Consider ``item``; return True if it was kept."""
        if len(self._entries) < self.capacity:
            self._entries.append((score, item))
            return True

        worst = self._worst_index()
        if self._better(score, self._entries[worst][0]):
            self._entries[worst] = (score, item)
            return True
        return False

    def ranked(self) -> list[T]:
        """Kept items, best first."""
        ordered = sorted(self._entries, key=lambda entry: entry[0], reverse=self.prefer_higher)
        return [item for _, item in ordered]

"""Bounded top-N score structure backed by an array min-heap."""

import typing as t
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ScoreEntry:
    """A named score; compared and stored by value."""

    name: str
    score: float

    def to_dict(self) -> dict[str, t.Any]:
        """Return the entry as a plain ``{name, score}`` mapping.

        :return: Dictionary form of the entry.
        """
        return asdict(self)


class BoundedTopStore:
    """Keep the ``capacity`` highest scores ever inserted.

    Entries live in an implicit binary min-heap keyed on ``score`` (children
    of ``i`` at ``2i+1`` and ``2i+2``), so the current minimum is always at
    the root. When full, a new entry replaces the root only if its score is
    strictly greater; on a tie the existing entry stays.

    Not thread-safe: callers serialize every public method.

    :param capacity: Maximum number of entries retained.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._heap: list[ScoreEntry] = []

    @property
    def capacity(self) -> int:
        """Maximum number of retained entries."""
        return self._capacity

    @property
    def entries(self) -> tuple[ScoreEntry, ...]:
        """Snapshot of the heap array in heap order."""
        return tuple(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, entry: ScoreEntry) -> None:
        """Insert an entry, evicting the minimum when at capacity.

        :param entry: The entry to insert.
        """
        heap = self._heap
        if len(heap) < self._capacity:
            heap.append(entry)
            self._sift_up(len(heap) - 1)
        elif entry.score > heap[0].score:
            heap[0] = entry
            self._sift_down(0)
        # otherwise it never made the top N

    def get_sorted_scores(self) -> list[ScoreEntry]:
        """Return every entry sorted by score, highest first.

        :return: A new list; the heap itself is left untouched.
        """
        return sorted(self._heap, key=lambda e: e.score, reverse=True)

    def clear(self) -> None:
        """Drop all entries, keeping the capacity."""
        self._heap.clear()

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[parent].score <= heap[i].score:
                break
            heap[parent], heap[i] = heap[i], heap[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and heap[left].score < heap[smallest].score:
                smallest = left
            if right < size and heap[right].score < heap[smallest].score:
                smallest = right
            if smallest == i:
                return
            heap[i], heap[smallest] = heap[smallest], heap[i]
            i = smallest

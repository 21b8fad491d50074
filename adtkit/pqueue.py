"""A binary min-heap priority queue ordered by a strcmp-style comparator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class PriorityQueue:
    """Entries come out smallest first.

    ``compare(a, b)`` returns a negative number, zero or a positive number as
    ``a`` is less than, equal to or greater than ``b``. Without one, the
    entries' own ordering is used.
    """

    def __init__(self, compare: Callable[[Any, Any], int] | None = None) -> None:
        self._compare = compare or _default_compare
        self._heap: list[Any] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def add(self, entry: Any) -> None:
        """Insert ``entry`` and move it up until its parent is not larger."""
        if entry is None:
            raise ValueError("None cannot be stored in a priority queue")
        heap = self._heap
        heap.append(entry)
        idx = len(heap) - 1
        while idx > 0:
            parent = (idx - 1) // 2
            if self._compare(heap[parent], heap[idx]) <= 0:
                break
            heap[parent], heap[idx] = heap[idx], heap[parent]
            idx = parent

    def remove(self) -> Any:
        """Remove and return the smallest entry."""
        heap = self._heap
        if not heap:
            raise IndexError("remove from empty priority queue")
        bottom = heap.pop()
        if not heap:
            return bottom
        top = heap[0]
        size = len(heap)
        idx = 0
        while True:
            child = 2 * idx + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._compare(heap[right], heap[child]) < 0:
                child = right
            if self._compare(bottom, heap[child]) <= 0:
                break
            heap[idx] = heap[child]
            idx = child
        heap[idx] = bottom
        return top
"""A bounded set of strings kept in sorted order and searched by bisection."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator

from adtkit.hash_table import SetFullError


class SortedSet:
    """An ordered collection of distinct strings with a fixed capacity.

    Lookups take O(log n); insertions and removals take O(n) because the
    elements after the affected position shift to keep the order.
    """

    def __init__(self, max_elements: int) -> None:
        if max_elements < 0:
            raise ValueError("max_elements must not be negative")
        self._capacity = max_elements
        self._data: list[str] = []

    @property
    def capacity(self) -> int:
        """The largest number of elements the set can hold."""
        return self._capacity

    def _search(self, elt: str) -> tuple[int, bool]:
        idx = bisect_left(self._data, elt)
        found = idx < len(self._data) and self._data[idx] == elt
        return idx, found

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, elt: object) -> bool:
        if not isinstance(elt, str):
            return False
        return self._search(elt)[1]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def add(self, elt: str) -> None:
        """Insert ``elt`` at its sorted position unless it is already present."""
        idx, found = self._search(elt)
        if found:
            return
        if len(self._data) >= self._capacity:
            raise SetFullError(f"set is full ({self._capacity} elements)")
        self._data.insert(idx, elt)

    def remove(self, elt: str) -> None:
        """Remove ``elt`` if present; absent elements are ignored."""
        idx, found = self._search(elt)
        if found:
            del self._data[idx]

    def find(self, elt: str) -> str | None:
        """Return the stored element equal to ``elt``, or None."""
        idx, found = self._search(elt)
        return self._data[idx] if found else None

    def elements(self) -> list[str]:
        """Return a copy of the elements in ascending order."""
        return list(self._data)
"""A bounded set of strings stored in insertion order and searched linearly."""

from __future__ import annotations

from collections.abc import Iterator

from adtkit.hash_table import SetFullError


class UnsortedSet:
    """An unordered collection of distinct strings with a fixed capacity.

    New elements go to the end; a removed element's slot is filled by the
    last element, so the order is not preserved across removals.
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

    def _search(self, elt: object) -> int | None:
        for idx, stored in enumerate(self._data):
            if stored == elt:
                return idx
        return None

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, elt: object) -> bool:
        return self._search(elt) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def add(self, elt: str) -> None:
        """Append ``elt`` unless it is already present."""
        if self._search(elt) is not None:
            return
        if len(self._data) >= self._capacity:
            raise SetFullError(f"set is full ({self._capacity} elements)")
        self._data.append(elt)

    def remove(self, elt: str) -> None:
        """Remove ``elt`` if present, moving the last element into its slot."""
        idx = self._search(elt)
        if idx is None:
            return
        last = self._data.pop()
        if idx < len(self._data):
            self._data[idx] = last

    def find(self, elt: str) -> str | None:
        """Return the stored element equal to ``elt``, or None."""
        idx = self._search(elt)
        return None if idx is None else self._data[idx]

    def elements(self) -> list[str]:
        """Return a copy of the elements in storage order."""
        return list(self._data)
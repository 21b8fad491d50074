"""An open-addressing hash set with linear probing and deletion markers."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any

_MASK = 0xFFFFFFFF


class SetFullError(OverflowError):
    """Raised when an element is added to a set that has no room left."""


def strhash(s: str | bytes) -> int:
    """Return the 32-bit unsigned ``31 * h + c`` hash of a string.

    Bytes are taken as signed chars; text is hashed through its UTF-8 bytes.
    """
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    h = 0
    for b in data:
        signed = b - 256 if b > 127 else b
        h = (31 * h + signed) & _MASK
    return h


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class _Slot(Enum):
    EMPTY = "E"
    FILLED = "F"
    DELETED = "D"


class HashSet:
    """A fixed-capacity set of arbitrary elements.

    ``compare(a, b)`` returns 0 when two elements are equal, in the manner of
    strcmp; ``hasher(elt)`` returns a non-negative integer hash.
    """

    def __init__(
        self,
        max_elements: int,
        compare: Callable[[Any, Any], int] | None = None,
        hasher: Callable[[Any], int] | None = None,
    ) -> None:
        if max_elements < 1:
            raise ValueError("max_elements must be at least 1")
        self._length = max_elements
        self._compare = compare or _default_compare
        self._hasher = hasher or strhash
        self._data: list[Any] = [None] * max_elements
        self._flags: list[_Slot] = [_Slot.EMPTY] * max_elements
        self._count = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the table."""
        return self._length

    def _search(self, elt: Any) -> tuple[int, bool]:
        """Return (slot, found): the matching slot, or where ``elt`` would go.

        When absent, the slot is the first deletion marker met while probing,
        or else the empty slot that ended the probe, or else the last slot
        probed if the whole table was walked.
        """
        start = self._hasher(elt) % self._length
        first_deleted: int | None = None
        locn = start
        for step in range(self._length):
            locn = (start + step) % self._length
            flag = self._flags[locn]
            if flag is _Slot.FILLED:
                if self._compare(self._data[locn], elt) == 0:
                    return locn, True
            elif flag is _Slot.DELETED:
                if first_deleted is None:
                    first_deleted = locn
            else:
                break
        return (locn if first_deleted is None else first_deleted), False

    def __len__(self) -> int:
        return self._count

    def __contains__(self, elt: object) -> bool:
        return self._search(elt)[1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements())

    def add(self, elt: Any) -> None:
        """Insert ``elt`` unless an equal element is already present."""
        index, found = self._search(elt)
        if found:
            return
        if self._count >= self._length or self._flags[index] is _Slot.FILLED:
            raise SetFullError(f"set is full ({self._length} elements)")
        self._data[index] = elt
        self._flags[index] = _Slot.FILLED
        self._count += 1

    def remove(self, elt: Any) -> None:
        """Remove the element equal to ``elt``; absent elements are ignored."""
        index, found = self._search(elt)
        if found:
            self._data[index] = None
            self._flags[index] = _Slot.DELETED
            self._count -= 1

    def find(self, elt: Any) -> Any | None:
        """Return the stored element equal to ``elt``, or None."""
        index, found = self._search(elt)
        return self._data[index] if found else None

    def elements(self) -> list[Any]:
        """Return the stored elements in slot order."""
        return [
            value
            for value, flag in zip(self._data, self._flags)
            if flag is _Slot.FILLED
        ]
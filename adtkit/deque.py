"""A double-ended queue of arbitrary items with comparator-based lookup."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any


def _equality_compare(stored: Any, item: Any) -> int:
    return 0 if stored == item else 1


class Deque:
    """Items can be added to or removed from either end in O(1).

    ``compare(stored, item)`` returns 0 when the two are considered equal,
    in the manner of strcmp; it is used by :meth:`find_item` and
    :meth:`remove_item`. Without one, plain equality is used.
    """

    def __init__(self, compare: Callable[[Any, Any], int] | None = None) -> None:
        self._items: deque[Any] = deque()
        self._compare = compare or _equality_compare

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    @staticmethod
    def _check_item(item: Any) -> None:
        if item is None:
            raise ValueError("None cannot be stored in a deque")

    def add_first(self, item: Any) -> None:
        """Put ``item`` at the front."""
        self._check_item(item)
        self._items.appendleft(item)

    def add_last(self, item: Any) -> None:
        """Put ``item`` at the rear."""
        self._check_item(item)
        self._items.append(item)

    def remove_first(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("remove from empty deque")
        return self._items.popleft()

    def remove_last(self) -> Any:
        """Remove and return the rear item."""
        if not self._items:
            raise IndexError("remove from empty deque")
        return self._items.pop()

    def first(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[0]

    def last(self) -> Any:
        """Return the rear item without removing it."""
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[-1]

    def remove_item(self, item: Any) -> None:
        """Remove the first stored item that compares equal to ``item``."""
        self._check_item(item)
        for idx, stored in enumerate(self._items):
            if self._compare(stored, item) == 0:
                del self._items[idx]
                return

    def find_item(self, item: Any) -> Any | None:
        """Return the first stored item that compares equal to ``item``, or None."""
        self._check_item(item)
        for stored in self._items:
            if self._compare(stored, item) == 0:
                return stored
        return None

    def items(self) -> list[Any]:
        """Return the items from front to rear as a new list."""
        return list(self._items)
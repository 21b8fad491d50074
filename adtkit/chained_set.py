"""A hash set whose slots each hold a chain of colliding elements."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import chain
from typing import Any

from adtkit.deque import Deque
from adtkit.hash_table import strhash


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class ChainedSet:
    """A set of arbitrary elements using separate chaining.

    ``compare(a, b)`` returns 0 when two elements are equal, in the manner of
    strcmp; ``hasher(elt)`` returns a non-negative integer hash. The number
    of elements is not bounded by ``max_elements``, which sets the number of
    chains.
    """

    def __init__(
        self,
        max_elements: int,
        compare: Callable[[Any, Any], int] | None = None,
        hasher: Callable[[Any], int] | None = None,
    ) -> None:
        if max_elements < 1:
            raise ValueError("max_elements must be at least 1")
        self._compare = compare or _default_compare
        self._hasher = hasher or strhash
        self._chains = [Deque(self._compare) for _ in range(max_elements)]
        self._count = 0

    @property
    def capacity(self) -> int:
        """The number of chains in the table."""
        return len(self._chains)

    def _chain(self, elt: Any) -> Deque:
        if elt is None:
            raise ValueError("None cannot be stored in the set")
        return self._chains[self._hasher(elt) % len(self._chains)]

    def __len__(self) -> int:
        return self._count

    def __contains__(self, elt: object) -> bool:
        return elt is not None and self.find(elt) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements())

    def add(self, elt: Any) -> None:
        """Insert ``elt`` at the front of its chain unless already present."""
        bucket = self._chain(elt)
        if bucket.find_item(elt) is None:
            bucket.add_first(elt)
            self._count += 1

    def remove(self, elt: Any) -> None:
        """Remove the element equal to ``elt``; absent elements are ignored."""
        bucket = self._chain(elt)
        if bucket.find_item(elt) is not None:
            bucket.remove_item(elt)
            self._count -= 1

    def find(self, elt: Any) -> Any | None:
        """Return the stored element equal to ``elt``, or None."""
        return self._chain(elt).find_item(elt)

    def elements(self) -> list[Any]:
        """Return the elements chain by chain, each chain from front to rear."""
        return list(chain.from_iterable(bucket.items() for bucket in self._chains))
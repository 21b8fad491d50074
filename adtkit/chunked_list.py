"""An indexable deque stored as a chain of small fixed-size chunks."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterator
from itertools import chain
from typing import Any

CHUNK_SIZE = 10


class ChunkedList:
    """A list supporting O(1) operations at both ends and indexing.

    Items live in chunks of at most :data:`CHUNK_SIZE`; a new chunk is started
    at an end whose chunk is full, and a chunk is dropped once it empties.
    Indexing walks the chunks, skipping whole chunks at a time.
    """

    def __init__(self) -> None:
        self._chunks: deque[deque[Any]] = deque()
        self._count = 0

    @property
    def chunk_count(self) -> int:
        """The number of chunks currently in use."""
        return len(self._chunks)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter(list(chain.from_iterable(self._chunks)))

    def _locate(self, index: int) -> tuple[deque[Any], int]:
        index = operator.index(index)
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("list index out of range")
        for chunk in self._chunks:
            if index < len(chunk):
                return chunk, index
            index -= len(chunk)
        raise IndexError("list index out of range")

    def __getitem__(self, index: int) -> Any:
        chunk, pos = self._locate(index)
        return chunk[pos]

    def __setitem__(self, index: int, item: Any) -> None:
        chunk, pos = self._locate(index)
        chunk[pos] = item

    def add_first(self, item: Any) -> None:
        """Put ``item`` at the front."""
        if item is None:
            raise ValueError("None cannot be stored in the list")
        if not self._chunks or len(self._chunks[0]) == CHUNK_SIZE:
            self._chunks.appendleft(deque())
        self._chunks[0].appendleft(item)
        self._count += 1

    def add_last(self, item: Any) -> None:
        """Put ``item`` at the rear."""
        if not self._chunks or len(self._chunks[-1]) == CHUNK_SIZE:
            self._chunks.append(deque())
        self._chunks[-1].append(item)
        self._count += 1

    def remove_first(self) -> Any:
        """Remove and return the front item."""
        if not self._count:
            raise IndexError("remove from empty list")
        chunk = self._chunks[0]
        item = chunk.popleft()
        if not chunk:
            self._chunks.popleft()
        self._count -= 1
        return item

    def remove_last(self) -> Any:
        """Remove and return the rear item."""
        if not self._count:
            raise IndexError("remove from empty list")
        chunk = self._chunks[-1]
        item = chunk.pop()
        if not chunk:
            self._chunks.pop()
        self._count -= 1
        return item

    def first(self) -> Any:
        """Return the front item without removing it."""
        if not self._count:
            raise IndexError("list is empty")
        return self._chunks[0][0]

    def last(self) -> Any:
        """Return the rear item without removing it."""
        if not self._count:
            raise IndexError("list is empty")
        return self._chunks[-1][-1]
"""Sorting tools: radix sort with queues, quicksort on a chunked list, heap sort."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from adtkit.chunked_list import ChunkedList
from adtkit.deque import Deque
from adtkit.pqueue import PriorityQueue
from adtkit.words import read_words

_INT_PREFIX = re.compile(r"[+-]?\d+")


def read_ints(stream: Iterable[str]) -> Iterator[int]:
    """Yield whitespace-separated integers from ``stream``.

    Reading stops at the first token that does not start with an integer;
    a token with an integer prefix yields that prefix and then stops.
    """
    for token in read_words(stream):
        match = _INT_PREFIX.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def _passes(largest: int, radix: int) -> int:
    """Return the number of digits of ``largest`` in base ``radix`` (0 for 0)."""
    passes = 0
    power = 1
    while power <= largest:
        power *= radix
        passes += 1
    return passes


def radix_sort(values: Iterable[int], radix: int = 10) -> list[int]:
    """Return the non-negative ``values`` in ascending order.

    Each pass drops the numbers into queues by one digit, least significant
    first, then collects the queues back in order.
    """
    if radix < 2:
        raise ValueError("radix must be at least 2")
    queue = Deque()
    largest = 0
    for value in values:
        if value < 0:
            raise ValueError("Sorry, only non-negative values allowed.")
        queue.add_last(value)
        largest = max(largest, value)

    buckets = [Deque() for _ in range(radix)]
    divisor = 1
    for _ in range(_passes(largest, radix)):
        while len(queue):
            value = queue.remove_first()
            buckets[value // divisor % radix].add_last(value)
        for bucket in buckets:
            while len(bucket):
                queue.add_last(bucket.remove_first())
        divisor *= radix
    return queue.items()


def _partition(items: ChunkedList, lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` around ``items[lo]`` by Hoare's scheme."""
    pivot = items[lo]
    i = lo - 1
    j = hi + 1
    while True:
        j -= 1
        while items[j] > pivot:
            j -= 1
        i += 1
        while items[i] < pivot:
            i += 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return ``items`` sorted ascending by quicksort over a chunked list."""
    store = ChunkedList()
    for item in items:
        store.add_last(item)
    pending = [(0, len(store) - 1)]
    while pending:
        lo, hi = pending.pop()
        if hi > lo:
            split = _partition(store, lo, hi)
            pending.append((split + 1, hi))
            pending.append((lo, split))
    return list(store)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return ``values`` ascending by draining a priority queue."""
    pq = PriorityQueue()
    for value in values:
        pq.add(value)
    result = []
    while pq:
        result.append(pq.remove())
    return result


def radix_main(argv: Sequence[str] | None = None) -> int:
    """Read non-negative integers from standard input and print them sorted."""
    try:
        ordered = radix_sort(read_ints(sys.stdin))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for value in ordered:
        print(value)
    return 0


def qsort_main(argv: Sequence[str] | None = None) -> int:
    """Print the words of the single named file in sorted order."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("missing filename", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8", errors="replace") as stream:
            words = list(read_words(stream))
    except OSError:
        print("cannot open file", file=sys.stderr)
        return 1
    for word in quick_sort(words):
        print(word)
    return 0


def sort_main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print them smallest first."""
    for value in heap_sort(read_ints(sys.stdin)):
        print(value)
    return 0
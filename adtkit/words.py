"""Split text into whitespace-separated words and count them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path


def read_words(stream: Iterable[str]) -> Iterator[str]:
    """Yield each run of non-whitespace characters in ``stream``, in order."""
    for line in stream:
        yield from line.split()


def count_words(path: str | Path) -> int:
    """Return the number of words in the file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as stream:
        return sum(1 for _ in read_words(stream))


def main(argv: Sequence[str] | None = None) -> int:
    """Print how many words the single named file holds."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Not enough arguments\n")
        return 0
    try:
        total = count_words(args[0])
    except OSError:
        print("Can't open the file\n")
        return 0
    print(f"There are {total} words\n")
    return 0
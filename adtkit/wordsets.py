"""Word-set tools: words of odd parity, distinct words and per-word counts."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from adtkit.chained_set import ChainedSet
from adtkit.hash_table import HashSet, SetFullError, strhash
from adtkit.words import read_words

MAX_SIZE = 18000


def _strcmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _new_set() -> ChainedSet:
    return ChainedSet(MAX_SIZE, _strcmp, strhash)


def _load(path: str | Path) -> list[str]:
    with open(path, encoding="utf-8", errors="replace") as stream:
        return list(read_words(stream))


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def odd_words(words: Iterable[str]) -> ChainedSet:
    """Return the set of words that occur an odd number of times."""
    odd = _new_set()
    for word in words:
        if odd.find(word) is not None:
            odd.remove(word)
        else:
            odd.add(word)
    return odd


def unique_words(words: Iterable[str]) -> ChainedSet:
    """Return the set of distinct words."""
    unique = _new_set()
    for word in words:
        unique.add(word)
    return unique


def remove_words(word_set: ChainedSet, words: Iterable[str]) -> ChainedSet:
    """Remove every word in ``words`` from ``word_set`` and return the set."""
    for word in words:
        word_set.remove(word)
    return word_set


@dataclass
class _Entry:
    word: str
    count: int


def _compare_entries(a: _Entry, b: _Entry) -> int:
    return _strcmp(a.word, b.word)


def _hash_entry(entry: _Entry) -> int:
    return strhash(entry.word)


def word_counts(words: Iterable[str]) -> dict[str, int]:
    """Return how often each word occurs, in the table's slot order.

    Raises SetFullError when there are more than MAX_SIZE distinct words.
    """
    table = HashSet(MAX_SIZE, _compare_entries, _hash_entry)
    for word in words:
        entry = table.find(_Entry(word, 0))
        if entry is None:
            table.add(_Entry(word, 1))
        else:
            entry.count += 1
    return {entry.word: entry.count for entry in table.elements()}


def parity_main(argv: Sequence[str] | None = None) -> int:
    """Print the total words and how many occur an odd number of times."""
    args = _args(argv)
    if len(args) != 1:
        print("usage: parity file1", file=sys.stderr)
        return 1
    try:
        words = _load(args[0])
    except OSError:
        print(f"parity: cannot open {args[0]}", file=sys.stderr)
        return 1
    odd = odd_words(words)
    print(f"{len(words)} total words")
    print(f"{len(odd)} words occur an odd number of times")
    return 0


def unique_main(argv: Sequence[str] | None = None) -> int:
    """Count distinct words, optionally removing those of a second file.

    With ``-l`` the remaining words are listed instead of the counts.
    """
    args = _args(argv)
    listing = bool(args) and args[0] == "-l"
    if listing:
        args = args[1:]
    if not 1 <= len(args) <= 2:
        print("usage: unique [-l] file1 [file2]", file=sys.stderr)
        return 1

    try:
        words = _load(args[0])
    except OSError:
        print(f"unique: cannot open {args[0]}", file=sys.stderr)
        return 1
    unique = unique_words(words)
    if not listing:
        print(f"{len(words)} total words")
        print(f"{len(unique)} distinct words")

    if len(args) == 2:
        try:
            removals = _load(args[1])
        except OSError:
            print(f"unique: cannot open {args[1]}", file=sys.stderr)
            return 1
        remove_words(unique, removals)
        if not listing:
            print(f"{len(unique)} remaining words")

    if listing:
        for word in unique.elements():
            print(word)
    return 0


def counts_main(argv: Sequence[str] | None = None) -> int:
    """Print each word of the named file with the number of times it occurs."""
    args = _args(argv)
    if len(args) != 1:
        print("usage: counts file", file=sys.stderr)
        return 1
    try:
        words = _load(args[0])
    except OSError:
        print(f"counts: cannot open {args[0]}", file=sys.stderr)
        return 1
    try:
        counts = word_counts(words)
    except SetFullError as exc:
        print(f"counts: {exc}", file=sys.stderr)
        return 1
    for word, count in counts.items():
        print(f"{word}: {count}")
    return 0
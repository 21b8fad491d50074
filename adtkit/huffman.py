"""Build a Huffman tree from byte counts, report code sizes and pack a file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from adtkit.pack import END, HuffmanNode, PackError, pack
from adtkit.pqueue import PriorityQueue


def _compare_nodes(a: HuffmanNode, b: HuffmanNode) -> int:
    return (a.count > b.count) - (a.count < b.count)


def byte_counts(data: bytes) -> list[int]:
    """Return how often each byte occurs, with a zero count for end of file."""
    counts = [0] * (END + 1)
    for b in bytes(data):
        counts[b] += 1
    return counts


def build_tree(counts: Sequence[int]) -> list[HuffmanNode | None]:
    """Build the Huffman tree and return its leaves indexed by symbol.

    Every byte with a positive count gets a leaf; the end-of-file symbol
    always gets a leaf with a count of zero.
    """
    pq = PriorityQueue(_compare_nodes)
    leaves: list[HuffmanNode | None] = [None] * (END + 1)
    for symbol, count in enumerate(counts[:END]):
        if count > 0:
            node = HuffmanNode(count)
            pq.add(node)
            leaves[symbol] = node
    eof = HuffmanNode(0)
    pq.add(eof)
    leaves[END] = eof

    while len(pq) > 1:
        first = pq.remove()
        second = pq.remove()
        joined = HuffmanNode(first.count + second.count)
        first.parent = joined
        second.parent = joined
        pq.add(joined)
    return leaves


def depth(node: HuffmanNode) -> int:
    """Return the number of edges from ``node`` up to the root."""
    steps = 0
    while node.parent is not None:
        node = node.parent
        steps += 1
    return steps


def describe(counts: Sequence[int], leaves: Sequence[HuffmanNode | None]) -> list[str]:
    """Return one line per leaf giving its count, code length and total bits."""
    lines = []
    for symbol, leaf in enumerate(leaves):
        if leaf is None:
            continue
        count = counts[symbol] if symbol < len(counts) else 0
        bits = depth(leaf)
        label = f"'{chr(symbol)}' :" if 32 <= symbol <= 126 else f"{symbol:03o}:"
        lines.append(f"{label} {count} x {bits} bits = {count * bits} bits")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Compress the file named first into the file named second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("usage: huffman infile outfile", file=sys.stderr)
        return 1
    try:
        data = Path(args[0]).read_bytes()
    except OSError:
        print("File Error")
        return 0

    counts = byte_counts(data)
    leaves = build_tree(counts)
    for line in describe(counts, leaves):
        print(line)

    try:
        pack(args[0], args[1], leaves)
    except PackError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        return exc.errno or 1
    return 0
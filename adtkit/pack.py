"""Canonical Huffman packing of a file given the leaves of its code tree."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import chain
from pathlib import Path

END = 256
MAX_LEVELS = 24
MAGIC = bytes([0o37, 0o36])


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree, linked only towards the root."""

    count: int
    parent: HuffmanNode | None = None


class PackError(Exception):
    """Raised when a tree and its input cannot be packed together."""


def _root(leaves: Sequence[HuffmanNode | None]) -> HuffmanNode:
    if len(leaves) != END + 1:
        raise ValueError(f"expected {END + 1} leaves, got {len(leaves)}")
    node = leaves[END]
    if node is None:
        raise PackError("tree has no end-of-file leaf")
    while node.parent is not None:
        node = node.parent
    return node


def code_lengths(leaves: Sequence[HuffmanNode | None]) -> list[int]:
    """Return the code length of each of the 257 symbols; 0 where no leaf."""
    root = _root(leaves)
    lengths = []
    for leaf in leaves:
        length = 0
        node = leaf
        while node is not None and node is not root:
            length += 1
            node = node.parent
        if length > MAX_LEVELS:
            raise PackError("Huffman tree has too many levels")
        lengths.append(length)
    return lengths


def _canonical_codes(lengths: list[int], maxlev: int) -> list[int]:
    codes = [0] * (END + 1)
    word = 0
    for level in range(maxlev, 0, -1):
        for symbol, length in enumerate(lengths):
            if length == level:
                codes[symbol] = word
                word += 1
        word >>= 1
    return codes


def pack_bytes(data: bytes, leaves: Sequence[HuffmanNode | None]) -> bytes:
    """Return the packed form of ``data`` using the tree behind ``leaves``."""
    data = bytes(data)
    root = _root(leaves)
    if root.count != len(data):
        raise PackError("Sizes from file and tree mismatch.")
    if not data:
        raise PackError("Cannot compress empty file.")

    lengths = code_lengths(leaves)
    maxlev = max(lengths)
    levcount = Counter(
        length for length, leaf in zip(lengths, leaves) if leaf is not None
    )
    codes = _canonical_codes(lengths, maxlev)

    out = bytearray(MAGIC)
    out += (len(data) & 0xFFFFFFFF).to_bytes(4, "big")
    out.append(maxlev & 0xFF)
    out.extend(levcount[level] & 0xFF for level in range(1, maxlev))
    out.append((levcount[maxlev] - 2) & 0xFF)
    for level in range(1, maxlev + 1):
        out.extend(s for s in range(END) if lengths[s] == level)

    byte = 0
    bitsleft = 8
    length = 0
    for symbol in chain(data, (END,)):
        if leaves[symbol] is None:
            raise PackError(f"byte {symbol} has no leaf in the tree")
        word = codes[symbol]
        length = lengths[symbol]
        while length >= bitsleft:
            length -= bitsleft
            byte = ((byte << bitsleft) | (word >> length)) & 0xFF
            out.append(byte)
            bitsleft = 8
        byte = ((byte << length) | word) & 0xFF
        bitsleft -= length
    if length > 0:
        out.append((byte << bitsleft) & 0xFF)
    return bytes(out)


def pack(infile: str | Path, outfile: str | Path, leaves: Sequence[HuffmanNode | None]) -> int:
    """Pack ``infile`` into ``outfile`` and return the total bits of the codes."""
    data = Path(infile).read_bytes()
    with open(outfile, "wb") as out:
        packed = pack_bytes(data, leaves)
        total = sum(
            length * leaf.count
            for length, leaf in zip(code_lengths(leaves), leaves)
            if leaf is not None
        )
        print(f"total bits required = {total}")
        out.write(packed)
    return total
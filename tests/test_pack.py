import pytest

from adtkit.huffman import build_tree, byte_counts
from adtkit.pack import (
    END,
    MAX_LEVELS,
    HuffmanNode,
    PackError,
    code_lengths,
    pack,
    pack_bytes,
)

TEXT = b"the quick brown fox jumps over the lazy dog, then sleeps again.\n"


def leaves_for(data):
    return build_tree(byte_counts(data))


def test_single_byte_worked_example():
    packed = pack_bytes(b"a", leaves_for(b"a"))
    assert packed == bytes(
        [0x1F, 0x1E, 0x00, 0x00, 0x00, 0x01, 0x01, 0x00, 0x61, 0x40]
    )


def test_header_fields():
    leaves = leaves_for(TEXT)
    packed = pack_bytes(TEXT, leaves)
    lengths = code_lengths(leaves)
    assert packed[:2] == b"\x1f\x1e"
    assert int.from_bytes(packed[2:6], "big") == len(TEXT)
    assert packed[6] == max(lengths)


def test_payload_length_matches_code_lengths():
    leaves = leaves_for(TEXT)
    lengths = code_lengths(leaves)
    maxlev = max(lengths)
    symbols = sum(1 for s in range(END) if lengths[s] > 0)
    header = 2 + 4 + 1 + maxlev + symbols
    bits = sum(lengths[b] for b in TEXT) + lengths[END]
    packed = pack_bytes(TEXT, leaves)
    assert len(packed) == header + (bits + 7) // 8


def test_symbols_listed_by_length_then_value():
    leaves = leaves_for(TEXT)
    lengths = code_lengths(leaves)
    maxlev = max(lengths)
    symbols = [s for s in range(END) if lengths[s] > 0]
    start = 7 + maxlev
    listed = list(pack_bytes(TEXT, leaves)[start:start + len(symbols)])
    assert sorted(listed) == symbols
    assert listed == sorted(listed, key=lambda s: (lengths[s], s))


def test_code_lengths_zero_for_absent_symbols():
    leaves = leaves_for(b"abab")
    lengths = code_lengths(leaves)
    assert len(lengths) == END + 1
    assert all(lengths[s] == 0 for s in range(END) if s not in b"ab")
    assert lengths[ord("a")] > 0 and lengths[END] > 0


def test_too_many_levels():
    root = HuffmanNode(1)
    node = root
    for _ in range(MAX_LEVELS + 1):
        node = HuffmanNode(0, node)
    leaves = [None] * (END + 1)
    leaves[END] = node
    with pytest.raises(PackError, match="too many levels"):
        code_lengths(leaves)


def test_size_mismatch():
    with pytest.raises(PackError, match="mismatch"):
        pack_bytes(b"abc", leaves_for(b"ab"))


def test_empty_input():
    with pytest.raises(PackError, match="empty"):
        pack_bytes(b"", leaves_for(b""))


def test_wrong_number_of_leaves():
    with pytest.raises(ValueError):
        code_lengths([HuffmanNode(0)])


def test_pack_writes_file_and_reports_bits(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.bin"
    src.write_bytes(TEXT)
    leaves = leaves_for(TEXT)
    total = pack(src, dst, leaves)
    assert dst.read_bytes() == pack_bytes(TEXT, leaves)
    lengths = code_lengths(leaves)
    assert total == sum(lengths[b] for b in TEXT)
    assert capsys.readouterr().out == f"total bits required = {total}\n"


def test_pack_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        pack(tmp_path / "absent", tmp_path / "out.bin", leaves_for(b"x"))
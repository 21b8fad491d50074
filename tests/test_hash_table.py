import pytest

from adtkit.hash_table import HashSet, SetFullError, strhash


def _zero(_elt):
    return 0


def test_strhash_empty_is_zero():
    assert strhash("") == 0


def test_strhash_single_char_is_its_code():
    assert strhash("a") == ord("a")


def test_strhash_recurrence():
    base = "hashing"
    for extra in "xyz":
        assert strhash(base + extra) == (31 * strhash(base) + ord(extra)) % 2**32


def test_strhash_high_bytes_are_signed():
    assert strhash(bytes([0xFF])) == 2**32 - 1


def test_strhash_text_and_bytes_agree():
    assert strhash("caf\u00e9") == strhash("caf\u00e9".encode("utf-8"))
    assert 0 <= strhash("x" * 500) < 2**32


def test_add_find_remove_strings():
    s = HashSet(11)
    for word in ["one", "two", "three", "two"]:
        s.add(word)
    assert len(s) == 3
    assert sorted(s.elements()) == ["one", "three", "two"]
    assert s.find("two") == "two"
    s.remove("two")
    s.remove("absent")
    assert "two" not in s
    assert len(s) == 2


def test_probing_past_deleted_slot():
    s = HashSet(5, hasher=_zero)
    for word in ["a", "b", "c"]:
        s.add(word)
    s.remove("b")
    assert s.find("c") == "c"
    s.add("d")
    assert s.elements() == ["a", "d", "c"]


def test_full_table_raises_and_tombstone_reused():
    s = HashSet(2, hasher=_zero)
    s.add("x")
    s.add("y")
    with pytest.raises(SetFullError):
        s.add("z")
    s.add("x")
    assert len(s) == 2
    s.remove("x")
    s.add("z")
    assert sorted(s) == ["y", "z"]


def test_lookup_in_full_table_without_match():
    s = HashSet(2, hasher=_zero)
    s.add("x")
    s.add("y")
    assert s.find("q") is None
    assert "q" not in s


def test_custom_compare_returns_stored_element():
    def fold_compare(a, b):
        a, b = a.lower(), b.lower()
        return (a > b) - (a < b)

    def fold_hash(value):
        return strhash(value.lower())

    s = HashSet(7, fold_compare, fold_hash)
    s.add("Hello")
    s.add("HELLO")
    assert len(s) == 1
    assert s.find("hello") == "Hello"


def test_generic_entries():
    class Entry:
        def __init__(self, word):
            self.word = word
            self.count = 1

    def cmp(a, b):
        return (a.word > b.word) - (a.word < b.word)

    s = HashSet(13, cmp, lambda e: strhash(e.word))
    s.add(Entry("w"))
    stored = s.find(Entry("w"))
    stored.count += 1
    assert s.find(Entry("w")).count == 2


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        HashSet(0)
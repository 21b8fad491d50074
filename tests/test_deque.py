import pytest

from adtkit.deque import Deque


def test_add_last_keeps_queue_order():
    d = Deque()
    for value in ["a", "b", "c"]:
        d.add_last(value)
    assert d.items() == ["a", "b", "c"]
    assert len(d) == 3


def test_add_first_reverses_order():
    d = Deque()
    for value in [1, 2, 3]:
        d.add_first(value)
    assert d.items() == [3, 2, 1]


def test_remove_ends():
    d = Deque()
    for value in [1, 2, 3, 4]:
        d.add_last(value)
    assert d.remove_first() == 1
    assert d.remove_last() == 4
    assert d.items() == [2, 3]
    assert len(d) == 2


def test_first_and_last_do_not_remove():
    d = Deque()
    d.add_last("x")
    d.add_last("y")
    assert d.first() == "x"
    assert d.last() == "y"
    assert len(d) == 2


def test_stack_use_from_front():
    d = Deque()
    pushed = [(0, 0), (1, 0), (1, 1)]
    for coord in pushed:
        d.add_first(coord)
    popped = [d.remove_first() for _ in pushed]
    assert popped == list(reversed(pushed))


def test_stack_use_from_rear():
    d = Deque()
    pushed = ["p", "q", "r"]
    for value in pushed:
        d.add_last(value)
    popped = [d.remove_last() for _ in pushed]
    assert popped == list(reversed(pushed))
    assert len(d) == 0


@pytest.mark.parametrize("method", ["remove_first", "remove_last", "first", "last"])
def test_empty_deque_raises(method):
    d = Deque()
    d.add_last("only")
    assert d.remove_first() == "only"
    assert d.items() == []
    with pytest.raises(IndexError):
        getattr(d, method)()
    assert len(d) == 0


def test_none_is_rejected():
    d = Deque()
    with pytest.raises(ValueError):
        d.add_first(None)
    with pytest.raises(ValueError):
        d.add_last(None)
    assert len(d) == 0


def test_find_item_uses_compare_and_returns_stored():
    def by_key(stored, item):
        return (stored[0] > item[0]) - (stored[0] < item[0])

    d = Deque(by_key)
    stored = ("k", 42)
    d.add_last(("a", 1))
    d.add_last(stored)
    assert d.find_item(("k", None)) is stored
    assert d.find_item(("z", None)) is None


def test_remove_item_removes_only_first_match():
    d = Deque()
    for value in ["a", "b", "a", "c"]:
        d.add_last(value)
    d.remove_item("a")
    assert d.items() == ["b", "a", "c"]


def test_remove_item_last_element():
    d = Deque()
    for value in ["a", "b", "c"]:
        d.add_last(value)
    d.remove_item("c")
    assert d.items() == ["a", "b"]


def test_remove_item_absent_leaves_deque_unchanged():
    d = Deque()
    d.add_last("a")
    d.remove_item("missing")
    assert d.items() == ["a"]


def test_items_is_a_copy():
    d = Deque()
    d.add_last(1)
    snapshot = d.items()
    snapshot.append(2)
    assert d.items() == [1]
    assert list(d) == [1]
import pytest
from hypothesis import given
from hypothesis import strategies as st

from probemap.hashset import ProbingHashSet
from probemap.primes import is_prime, next_prime

NUMS = 4000
GAP = 37


def _filled():
    table = ProbingHashSet()
    i = GAP
    while i != 0:
        table.add(i)
        i = (i + GAP) % NUMS
    return table


def test_gap_insertion_then_remove_odds():
    original = _filled()
    copied = original.copy()
    for i in range(1, NUMS, 2):
        copied.remove(i)
    for i in range(2, NUMS, 2):
        assert i in copied
    for i in range(1, NUMS, 2):
        assert i not in copied


def test_gap_insertion_covers_all_nonzero():
    table = _filled()
    assert len(table) == NUMS - 1
    assert set(table) == set(range(1, NUMS))
    assert 0 not in table


def test_copy_is_independent():
    original = _filled()
    copied = original.copy()
    for i in range(1, NUMS, 2):
        copied.remove(i)
    assert all(i in original for i in range(1, NUMS))
    assert len(original) == NUMS - 1
    assert len(copied) == len(range(2, NUMS, 2))


def test_default_capacity():
    assert ProbingHashSet().capacity() == 101


@pytest.mark.parametrize("size", [1, 10, 50, 200])
def test_capacity_is_next_prime(size):
    assert ProbingHashSet(size).capacity() == next_prime(size)


def test_empty_set():
    table = ProbingHashSet()
    assert len(table) == 0
    assert list(table) == []
    assert 5 not in table


def test_add_duplicate_returns_false():
    table = ProbingHashSet()
    assert table.add("a") is True
    assert table.add("a") is False
    assert len(table) == 1


def test_remove_missing_returns_false():
    table = ProbingHashSet()
    assert table.remove("missing") is False
    table.add("x")
    assert table.remove("x") is True
    assert table.remove("x") is False
    assert "x" not in table


def test_readd_after_remove():
    table = ProbingHashSet()
    table.add(7)
    table.remove(7)
    assert table.add(7) is True
    assert 7 in table
    assert len(table) == 1


def test_clear():
    table = ProbingHashSet()
    for word in ["red", "green", "blue"]:
        table.add(word)
    table.clear()
    assert len(table) == 0
    assert "red" not in table
    assert list(table) == []


def test_growth_keeps_prime_capacity_and_items():
    table = ProbingHashSet(5)
    start = table.capacity()
    for i in range(100):
        table.add(i)
    assert table.capacity() > start
    assert is_prime(table.capacity())
    assert set(table) == set(range(100))


def test_load_factor_stays_at_most_half():
    table = ProbingHashSet(3)
    for i in range(500):
        table.add(i)
        assert len(table) <= table.capacity() // 2


def test_colliding_keys():
    table = ProbingHashSet(11)
    cap = table.capacity()
    keys = [k * cap for k in range(5)]
    for k in keys:
        table.add(k)
    table.remove(keys[1])
    assert keys[1] not in table
    for k in keys[:1] + keys[2:]:
        assert k in table


@given(
    st.lists(
        st.tuples(st.sampled_from(["add", "remove"]), st.integers(-50, 50)),
        max_size=300,
    )
)
def test_matches_builtin_set(ops):
    table = ProbingHashSet(3)
    model = set()
    for op, value in ops:
        if op == "add":
            assert table.add(value) == (value not in model)
            model.add(value)
        else:
            assert table.remove(value) == (value in model)
            model.discard(value)
    assert len(table) == len(model)
    assert set(table) == model
    for value in range(-50, 51):
        assert (value in table) == (value in model)
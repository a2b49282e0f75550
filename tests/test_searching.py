import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    HashSearch,
    binary_search,
    linear_search,
    recursive_binary_search,
    recursive_linear_search,
)

small_lists = st.lists(st.integers(-50, 50), max_size=40)


def _filled_table(size, values):
    table = HashSearch(size)
    for value in values:
        table.insert(value)
    return table


@given(small_lists, st.integers(-50, 50))
def test_linear_search_matches_first_occurrence(items, target):
    result = linear_search(items, target)
    if target in items:
        assert result == items.index(target)
    else:
        assert result is None


@given(small_lists, st.integers(-50, 50))
def test_recursive_linear_search_agrees_with_iterative(items, target):
    assert recursive_linear_search(items, target) == linear_search(items, target)


def test_recursive_linear_search_honours_start():
    items = [4, 8, 4, 9]
    assert recursive_linear_search(items, 4, 1) == 2
    assert recursive_linear_search(items, 8, 2) is None


def test_recursive_linear_search_rejects_negative_start():
    with pytest.raises(ValueError):
        recursive_linear_search([1, 2], 1, -1)


def test_searches_on_empty_sequence():
    assert linear_search([], 3) is None
    assert binary_search([], 3) is None
    assert recursive_binary_search([], 3) is None


@given(st.lists(st.integers(-100, 100), max_size=60), st.integers(-100, 100))
def test_binary_search_finds_present_values(items, target):
    items = sorted(items)
    for search in (binary_search, recursive_binary_search):
        result = search(items, target)
        if target in items:
            assert items[result] == target
        else:
            assert result is None


def test_hash_search_membership_and_length():
    table = _filled_table(7, [3, 10, 17, 5])
    assert 10 in table
    assert 5 in table
    assert 4 not in table
    assert "x" not in table
    assert len(table) == 4


def test_hash_search_bucket_order_is_most_recent_first():
    table = HashSearch(7)
    table.insert(3)
    table.insert(10)
    table.insert(1)
    assert list(table) == [1, 10, 3]


@given(st.lists(st.integers(-1000, 1000)), st.integers(1, 13))
def test_hash_search_holds_every_value(values, size):
    table = _filled_table(size, values)
    assert sorted(table) == sorted(values)
    assert all(value in table for value in values)
    assert table.size == size


def test_hash_search_rejects_bad_size():
    with pytest.raises(ValueError):
        HashSearch(0)
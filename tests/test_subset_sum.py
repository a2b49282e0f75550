from itertools import combinations

from hypothesis import given
from hypothesis import strategies as st

from dsakit.subset_sum import subset_sums, unique_sorted


def test_unique_sorted_drops_duplicates():
    assert unique_sorted([3, 1, 3, 2, 1]) == [1, 2, 3]


@given(st.lists(st.integers(-20, 20)))
def test_unique_sorted_invariants(values):
    result = unique_sorted(values)
    assert result == sorted(result)
    assert set(result) == set(values)
    assert len(result) == len(set(result))


def test_worked_example_order():
    assert list(subset_sums([1, 2, 3, 4], 5)) == [(1, 4), (2, 3)]


def test_zero_target_yields_empty_subset():
    assert list(subset_sums([1, 2], 0)) == [()]


def test_no_solution():
    assert list(subset_sums([5, 6], 3)) == []


@given(st.sets(st.integers(1, 30), max_size=10), st.integers(1, 60))
def test_finds_exactly_the_matching_subsets(values, target):
    pool = unique_sorted(values)
    found = list(subset_sums(pool, target))
    expected = {
        combo
        for size in range(len(pool) + 1)
        for combo in combinations(pool, size)
        if sum(combo) == target
    }
    assert len(found) == len(set(found))
    assert set(found) == expected
    assert all(sum(subset) == target for subset in found)
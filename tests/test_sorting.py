import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    SortResult,
    bubble_sort,
    bucket_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    randomized_quick_sort,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)
natural_lists = st.lists(st.integers(min_value=0, max_value=5000), max_size=60)


@given(int_lists)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


@given(int_lists)
def test_insertion_sort_both_directions(values):
    assert insertion_sort(values) == sorted(values)
    assert insertion_sort(values, reverse=True) == sorted(values, reverse=True)


@given(int_lists)
def test_merge_sort_both_directions(values):
    assert merge_sort(values) == sorted(values)
    assert merge_sort(values, reverse=True) == sorted(values, reverse=True)


def test_insertion_and_merge_are_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

        def __ge__(self, other):
            return self.pair[0] >= other.pair[0]

    wrapped = [Keyed(p) for p in pairs]
    expected = sorted(pairs, key=lambda p: p[0])
    assert [k.pair for k in insertion_sort(wrapped)] == expected
    assert [k.pair for k in merge_sort(wrapped)] == expected


def test_sorts_do_not_modify_input():
    values = [3, 1, 2]
    bubble_sort(values)
    merge_sort(values)
    quick_sort(values)
    heap_sort(values)
    assert values == [3, 1, 2]


@given(int_lists)
def test_quick_sort_matches_sorted(values):
    result = quick_sort(values)
    assert result.values == sorted(values)


def test_quick_sort_sorted_and_equal_inputs_cost_the_same():
    size = 200
    ascending = quick_sort(range(size))
    equal = quick_sort([10] * size)
    assert ascending.steps == equal.steps
    assert ascending.steps == sum(range(size))


@given(int_lists, st.integers(min_value=0, max_value=1000))
def test_randomized_quick_sort_matches_sorted(values, seed):
    result = randomized_quick_sort(values, random.Random(seed))
    assert result.values == sorted(values)


def test_randomized_quick_sort_is_reproducible_with_seed():
    data = [random.Random(5).randrange(30000) for _ in range(300)]
    first = randomized_quick_sort(data, random.Random(42))
    second = randomized_quick_sort(data, random.Random(42))
    assert first == second


@given(int_lists)
def test_heap_sort_matches_sorted(values):
    result = heap_sort(values)
    assert result.values == sorted(values)
    assert result.steps >= len(values)


@given(natural_lists)
def test_counting_sort_matches_sorted(values):
    assert counting_sort(values).values == sorted(values)


def test_counting_sort_step_count_for_ten_values():
    result = counting_sort([3, 10, 0, 7, 7, 1, 9, 2, 5, 4], max_value=10)
    assert result.values == [0, 1, 2, 3, 4, 5, 7, 7, 9, 10]
    assert result.steps == 41


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([1, 5], max_value=4)
    with pytest.raises(ValueError):
        counting_sort([-1, 2])


@given(natural_lists)
def test_radix_sort_matches_sorted(values):
    assert radix_sort(values).values == sorted(values)


def test_radix_sort_of_zeros_takes_no_passes():
    assert radix_sort([0, 0, 0]) == SortResult([0, 0, 0], 0)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([5, -2])


@given(st.lists(st.floats(min_value=0, max_value=1, exclude_max=True), max_size=60))
def test_bucket_sort_matches_sorted(values):
    assert bucket_sort(values).values == sorted(values)


def test_bucket_sort_one_value_per_bucket():
    values = [0.95, 0.05, 0.55, 0.35, 0.15, 0.75, 0.25, 0.85, 0.45, 0.65]
    result = bucket_sort(values)
    assert result.values == sorted(values)
    assert result.steps == 29


def test_bucket_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        bucket_sort([0.5, 1.0])
"""Comparison and distribution sorts, some reporting the basic steps they took."""

from __future__ import annotations

import random
from bisect import bisect_left
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from math import floor
from typing import Any


@dataclass(frozen=True)
class SortResult:
    """Sorted values together with the number of basic steps counted."""

    values: list[Any] = field(default_factory=list)
    steps: int = 0


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, bubbling the smallest value down to the front each pass."""
    values = list(items)
    last = len(values) - 1
    for current in range(len(values)):
        swapped = False
        for walker in range(last, current, -1):
            if values[walker] < values[walker - 1]:
                values[walker], values[walker - 1] = values[walker - 1], values[walker]
                swapped = True
        if not swapped:
            break
    return values


def insertion_sort(items: Iterable[Any], reverse: bool = False) -> list[Any]:
    """Return a stably sorted copy, ascending unless ``reverse`` is set."""
    values = list(items)

    def out_of_place(held: Any, other: Any) -> bool:
        return other < held if reverse else held < other

    for current in range(1, len(values)):
        held = values[current]
        walker = current - 1
        while walker >= 0 and out_of_place(held, values[walker]):
            values[walker + 1] = values[walker]
            walker -= 1
        values[walker + 1] = held
    return values


def merge_sort(items: Iterable[Any], reverse: bool = False) -> list[Any]:
    """Return a stably sorted copy by top-down merging."""
    values = list(items)

    def takes_left(left: Any, right: Any) -> bool:
        return left >= right if reverse else left <= right

    def sort(chunk: list[Any]) -> list[Any]:
        if len(chunk) <= 1:
            return chunk
        mid = (len(chunk) + 1) // 2
        left, right = sort(chunk[:mid]), sort(chunk[mid:])
        merged: list[Any] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if takes_left(left[i], right[j]):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    return sort(values)


def _quick(values: list[Any], choose: Callable[[int, int], int] | None) -> int:
    """Sort ``values`` in place with Lomuto partitioning; return comparisons made."""
    steps = 0
    pending = [(0, len(values) - 1)]
    while pending:
        p, r = pending.pop()
        if p >= r:
            continue
        if choose is not None:
            pick = choose(p, r)
            values[pick], values[r] = values[r], values[pick]
        pivot = values[r]
        i = p - 1
        for j in range(p, r):
            steps += 1
            if values[j] <= pivot:
                i += 1
                values[i], values[j] = values[j], values[i]
        q = i + 1
        values[q], values[r] = values[r], values[q]
        pending.append((q + 1, r))
        pending.append((p, q - 1))
    return steps


def quick_sort(items: Iterable[Any]) -> SortResult:
    """Quicksort with the last element as pivot; steps are partition comparisons."""
    values = list(items)
    steps = _quick(values, None)
    return SortResult(values, steps)


def randomized_quick_sort(
    items: Iterable[Any], rng: random.Random | None = None
) -> SortResult:
    """Quicksort with a uniformly random pivot drawn from ``rng``."""
    values = list(items)
    generator = rng if rng is not None else random.Random()
    steps = _quick(values, lambda p, r: generator.randrange(p, r + 1))
    return SortResult(values, steps)


def heap_sort(items: Iterable[Any]) -> SortResult:
    """Heapsort; steps count every heapify call, recursive ones included."""
    values = list(items)
    steps = 0

    def sift_down(index: int, size: int) -> None:
        nonlocal steps
        while True:
            steps += 1
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and values[left] > values[largest]:
                largest = left
            if right < size and values[right] > values[largest]:
                largest = right
            if largest == index:
                return
            values[index], values[largest] = values[largest], values[index]
            index = largest

    count = len(values)
    for index in range(count // 2 - 1, -1, -1):
        sift_down(index, count)
    for end in range(count - 1, -1, -1):
        values[0], values[end] = values[end], values[0]
        sift_down(0, end)
    return SortResult(values, steps)


def _counting_pass(
    values: list[int], key: Callable[[int], int], max_key: int
) -> tuple[list[int], int]:
    steps = max_key + 1
    tallies = [0] * (max_key + 1)
    for value in values:
        steps += 1
        tallies[key(value)] += 1
    for index in range(1, max_key + 1):
        steps += 1
        tallies[index] += tallies[index - 1]
    output: list[int] = [0] * len(values)
    for value in reversed(values):
        steps += 1
        slot = key(value)
        tallies[slot] -= 1
        output[tallies[slot]] = value
    return output, steps


def counting_sort(items: Iterable[int], max_value: int | None = None) -> SortResult:
    """Stable counting sort of integers in ``0..max_value``.

    ``max_value`` defaults to the largest item. Steps count every loop pass.
    """
    values = list(items)
    if max_value is None:
        max_value = max(values, default=0)
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")
    output, steps = _counting_pass(values, lambda v: v, max_value)
    return SortResult(output, steps)


def radix_sort(items: Iterable[int]) -> SortResult:
    """Least-significant-digit radix sort of non-negative integers in base 10."""
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(values, default=0)
    steps = 0
    exponent = 1
    while largest // exponent > 0:
        digit_of = lambda v, e=exponent: (v // e) % 10  # noqa: E731
        values, pass_steps = _counting_pass(values, digit_of, 9)
        steps += pass_steps
        exponent *= 10
    return SortResult(values, steps)


def bucket_sort(items: Iterable[float]) -> SortResult:
    """Bucket sort of values in ``[0, 1)`` with one ordered bucket per value."""
    values = list(items)
    size = len(values)
    for value in values:
        if not 0 <= value < 1:
            raise ValueError(f"value {value} outside [0, 1)")
    buckets: list[list[float]] = [[] for _ in range(size)]
    steps = 0
    for value in values:
        steps += 1
        bucket = buckets[floor(size * value)]
        position = bisect_left(bucket, value)
        steps += max(position - 1, 0)
        bucket.insert(position, value)
    output: list[float] = []
    for bucket in buckets:
        if len(output) == size:
            break
        steps += len(bucket)
        output.extend(bucket)
        if len(output) < size:
            steps += 1
    return SortResult(output, steps)
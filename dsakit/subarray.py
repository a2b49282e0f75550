"""Maximum contiguous subarray by brute force and by divide and conquer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from itertools import accumulate


@dataclass(frozen=True)
class MaxSubarray:
    """Inclusive bounds of a maximum subarray, its sum and the steps taken."""

    low: int
    high: int
    total: int
    steps: int = field(default=0, compare=False)


def max_subarray_brute(values: Sequence[int]) -> MaxSubarray:
    """Try every start and end; the earliest best subarray wins ties."""
    if not values:
        raise ValueError("values must not be empty")
    best: MaxSubarray | None = None
    steps = 0
    for start in range(len(values)):
        for end, running in enumerate(accumulate(values[start:]), start=start):
            steps += 1
            if best is None or running > best.total:
                best = MaxSubarray(start, end, running)
    assert best is not None
    return replace(best, steps=steps)


def max_crossing_subarray(
    values: Sequence[int], low: int, mid: int, high: int
) -> MaxSubarray:
    """Best subarray of ``values[low:high+1]`` that contains ``mid`` and ``mid + 1``."""
    if not 0 <= low <= mid < high < len(values):
        raise ValueError("need 0 <= low <= mid < high < len(values)")
    left_total = left_low = None
    running = 0
    for index in range(mid, low - 1, -1):
        running += values[index]
        if left_total is None or running > left_total:
            left_total, left_low = running, index
    right_total = right_high = None
    running = 0
    for index in range(mid + 1, high + 1):
        running += values[index]
        if right_total is None or running > right_total:
            right_total, right_high = running, index
    return MaxSubarray(left_low, right_high, left_total + right_total, high - low + 1)


def _divide(values: Sequence[int], low: int, high: int) -> MaxSubarray:
    if low == high:
        return MaxSubarray(low, high, values[low])
    mid = (low + high) // 2
    left = _divide(values, low, mid)
    right = _divide(values, mid + 1, high)
    cross = max_crossing_subarray(values, low, mid, high)
    steps = left.steps + right.steps + cross.steps
    if left.total >= right.total and left.total >= cross.total:
        best = left
    elif right.total >= left.total and right.total >= cross.total:
        best = right
    else:
        best = cross
    return replace(best, steps=steps)


def max_subarray_divide(values: Sequence[int]) -> MaxSubarray:
    """Find a maximum subarray by splitting in halves."""
    if not values:
        raise ValueError("values must not be empty")
    return _divide(values, 0, len(values) - 1)
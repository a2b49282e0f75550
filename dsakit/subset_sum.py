"""Backtracking search for subsets that add up to a target."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def unique_sorted(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def subset_sums(values: Iterable[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield, in backtracking order, each subset of ``values`` summing to ``target``.

    Values are taken in the given order; a branch is only followed while the
    running sum does not exceed the target, so the input is expected to be
    sorted ascending (see :func:`unique_sorted`).
    """
    pool = list(values)
    chosen: list[int] = []

    def search(total: int, level: int) -> Iterator[tuple[int, ...]]:
        if total == target:
            yield tuple(chosen)
        for index, value in enumerate(pool[level:], start=level):
            if total + value <= target:
                chosen.append(value)
                yield from search(total + value, index + 1)
                chosen.pop()

    yield from search(0, 0)
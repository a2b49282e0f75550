"""Linear, binary and hash-bucket search over integer collections."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any

DEFAULT_HASH_SIZE = 7


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return None


def recursive_linear_search(
    items: Sequence[Any], target: Any, start: int = 0
) -> int | None:
    """Recursively look for ``target`` from ``start`` onwards; return its index or None."""
    if start < 0:
        raise ValueError("start must not be negative")
    if start >= len(items):
        return None
    if items[start] == target:
        return start
    return recursive_linear_search(items, target, start + 1)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Iteratively search a sorted sequence; return an index of ``target`` or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if target > items[mid]:
            low = mid + 1
        elif target < items[mid]:
            high = mid - 1
        else:
            return mid
    return None


def recursive_binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Recursively search a sorted sequence; return an index of ``target`` or None."""

    def search(first: int, last: int) -> int | None:
        if last < first:
            return None
        mid = (first + last) // 2
        if target < items[mid]:
            return search(first, mid - 1)
        if target > items[mid]:
            return search(mid + 1, last)
        return mid

    return search(0, len(items) - 1)


class HashSearch:
    """Integers chained into buckets chosen by ``value % size``."""

    def __init__(self, size: int = DEFAULT_HASH_SIZE) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self._buckets: list[deque[int]] = [deque() for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _bucket(self, value: int) -> deque[int]:
        return self._buckets[value % len(self._buckets)]

    def insert(self, value: int) -> None:
        """Add ``value`` at the front of its bucket."""
        self._bucket(value).appendleft(value)
        self._count += 1

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._bucket(value)

    def __iter__(self) -> Iterator[int]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._count
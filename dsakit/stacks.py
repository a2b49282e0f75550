"""Bounded array stack and unbounded linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value``; raise StackOverflowError when full."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class _Node:
    __slots__ = ("value", "link")

    def __init__(self, value: Any, link: _Node | None) -> None:
        self.value = value
        self.link = link


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._count = 0

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.link
        self._count -= 1
        return node.value

    def top(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        """Drop every value."""
        self._top = None
        self._count = 0

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.link

    def __len__(self) -> int:
        return self._count
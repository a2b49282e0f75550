"""Singly, ordered, doubly and circular doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class DuplicateValueError(ValueError):
    """Raised when inserting a value that an ordered list already holds."""


class _Node:
    __slots__ = ("value", "link")

    def __init__(self, value: Any, link: _Node | None = None) -> None:
        self.value = value
        self.link = link


class _DNode:
    __slots__ = ("value", "forward", "backward")

    def __init__(
        self,
        value: Any,
        backward: _DNode | None = None,
        forward: _DNode | None = None,
    ) -> None:
        self.value = value
        self.backward = backward
        self.forward = forward


def _position_ascending(values: Iterable[Any], target: Any) -> int | None:
    for position, item in enumerate(values, start=1):
        if item == target:
            return position
        if item > target:
            return None
    return None


def _position_descending(values: Iterable[Any], target: Any) -> int | None:
    for position, item in enumerate(values, start=1):
        if item == target:
            return position
        if item < target:
            return None
    return None


class SinglyLinkedList:
    """Unordered singly linked list with positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._count = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> _Node:
        node = self._first
        for _ in range(index):
            assert node is not None
            node = node.link
        assert node is not None
        return node

    def insert_front(self, value: Any) -> None:
        """Put ``value`` before every other value."""
        self._first = _Node(value, self._first)
        self._count += 1

    def append(self, value: Any) -> None:
        """Put ``value`` after every other value."""
        node = _Node(value)
        if self._first is None:
            self._first = node
        else:
            self._node_at(self._count - 1).link = node
        self._count += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at zero-based ``position``.

        Raises IndexError on an empty list or a position outside ``0..len``.
        """
        if self._first is None:
            raise IndexError("cannot insert by position into an empty list")
        if not 0 <= position <= self._count:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            self.insert_front(value)
            return
        before = self._node_at(position - 1)
        before.link = _Node(value, before.link)
        self._count += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._first is None:
            raise IndexError("pop from an empty list")
        node = self._first
        self._first = node.link
        self._count -= 1
        return node.value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at zero-based ``position``."""
        if self._first is None:
            raise IndexError("delete from an empty list")
        if not 0 <= position < self._count:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            return self.pop_front()
        before = self._node_at(position - 1)
        node = before.link
        assert node is not None
        before.link = node.link
        self._count -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.link

    def __len__(self) -> int:
        return self._count


class OrderedList:
    """Singly linked list kept in ascending order without duplicates."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._count = 0
        for value in values:
            self.insert(value)

    def _search(self, value: Any) -> tuple[_Node | None, _Node | None, bool]:
        previous: _Node | None = None
        node = self._head
        while node is not None and value > node.value:
            previous, node = node, node.link
        return previous, node, node is not None and node.value == value

    def insert(self, value: Any) -> None:
        """Insert ``value`` in order; raise DuplicateValueError if present."""
        previous, node, found = self._search(value)
        if found:
            raise DuplicateValueError(f"{value!r} is already in the list")
        new = _Node(value, node)
        if previous is None:
            self._head = new
        else:
            previous.link = new
        self._count += 1

    def remove(self, value: Any) -> None:
        """Remove ``value``; raise ValueError if it is absent."""
        previous, node, found = self._search(value)
        if not found:
            raise ValueError(f"{value!r} is not in the list")
        assert node is not None
        if previous is None:
            self._head = node.link
        else:
            previous.link = node.link
        self._count -= 1

    def clear(self) -> None:
        """Drop every value."""
        self._head = None
        self._count = 0

    def __contains__(self, value: Any) -> bool:
        return self._search(value)[2]

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.link

    def __len__(self) -> int:
        return self._count


class DoublyLinkedList:
    """Doubly linked list kept in ascending order without duplicates."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DNode | None = None
        self._rear: _DNode | None = None
        self._count = 0
        for value in values:
            self.insert(value)

    def _search(self, value: Any) -> tuple[_DNode | None, _DNode | None]:
        previous: _DNode | None = None
        node = self._head
        while node is not None and value > node.value:
            previous, node = node, node.forward
        return previous, node

    def insert(self, value: Any) -> None:
        """Insert ``value`` in order; raise DuplicateValueError if present."""
        previous, successor = self._search(value)
        if successor is not None and successor.value == value:
            raise DuplicateValueError(f"{value!r} is already in the list")
        new = _DNode(value, previous, successor)
        if previous is None:
            self._head = new
        else:
            previous.forward = new
        if successor is None:
            self._rear = new
        else:
            successor.backward = new
        self._count += 1

    def remove(self, value: Any) -> None:
        """Remove ``value``; raise ValueError if it is absent."""
        _, node = self._search(value)
        if node is None or node.value != value:
            raise ValueError(f"{value!r} is not in the list")
        if node.backward is None:
            self._head = node.forward
        else:
            node.backward.forward = node.forward
        if node.forward is None:
            self._rear = node.backward
        else:
            node.forward.backward = node.backward
        self._count -= 1

    def position_from_head(self, value: Any) -> int | None:
        """One-based position of ``value`` counted from the head, or None."""
        return _position_ascending(self, value)

    def position_from_rear(self, value: Any) -> int | None:
        """One-based position of ``value`` counted from the rear, or None."""
        return _position_descending(reversed(self), value)

    def clear(self) -> None:
        """Drop every value."""
        self._head = self._rear = None
        self._count = 0

    def __contains__(self, value: Any) -> bool:
        return self.position_from_head(value) is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.forward

    def __reversed__(self) -> Iterator[Any]:
        node = self._rear
        while node is not None:
            yield node.value
            node = node.backward

    def __len__(self) -> int:
        return self._count


class CircularDoublyLinkedList:
    """Circular doubly linked list kept in ascending order without duplicates."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DNode | None = None
        self._count = 0
        for value in values:
            self.insert(value)

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head
        for _ in range(self._count):
            assert node is not None
            yield node
            node = node.forward

    def _find(self, value: Any) -> _DNode | None:
        for node in self._nodes():
            if node.value == value:
                return node
            if node.value > value:
                return None
        return None

    def insert(self, value: Any) -> None:
        """Insert ``value`` in order; raise DuplicateValueError if present."""
        new = _DNode(value)
        if self._head is None:
            new.forward = new.backward = new
            self._head = new
            self._count = 1
            return
        successor = next(
            (node for node in self._nodes() if value <= node.value), None
        )
        if successor is not None and successor.value == value:
            raise DuplicateValueError(f"{value!r} is already in the list")
        before = successor if successor is not None else self._head
        new.forward = before
        new.backward = before.backward
        assert before.backward is not None
        before.backward.forward = new
        before.backward = new
        if successor is self._head:
            self._head = new
        self._count += 1

    def remove(self, value: Any) -> None:
        """Remove ``value``; raise ValueError if it is absent."""
        node = self._find(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if self._count == 1:
            self._head = None
        else:
            assert node.backward is not None and node.forward is not None
            node.backward.forward = node.forward
            node.forward.backward = node.backward
            if node is self._head:
                self._head = node.forward
        self._count -= 1

    def position_from_head(self, value: Any) -> int | None:
        """One-based position of ``value`` counted from the head, or None."""
        return _position_ascending(self, value)

    def position_from_rear(self, value: Any) -> int | None:
        """One-based position of ``value`` counted from the rear, or None."""
        return _position_descending(reversed(self), value)

    def clear(self) -> None:
        """Drop every value."""
        self._head = None
        self._count = 0

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head.backward
        for _ in range(self._count):
            assert node is not None
            yield node.value
            node = node.backward

    def __len__(self) -> int:
        return self._count
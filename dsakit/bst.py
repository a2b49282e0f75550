"""Unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._count = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = _Node(value)
        self._count += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; a missing value is ignored."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.right is None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree (ascending)."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield values node first, then left and right subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values left and right subtrees first, then the node."""
        pending = [self._root] if self._root is not None else []
        output: list[Any] = []
        while pending:
            node = pending.pop()
            output.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return reversed(output)

    def smallest(self) -> Any:
        """Return the leftmost value."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def largest(self) -> Any:
        """Return the rightmost value."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return self._count
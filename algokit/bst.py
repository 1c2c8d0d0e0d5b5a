"""Unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree in insertion order; equal values go to the left."""

    def __init__(self, values=()):
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        return iter(self.inorder())

    def insert(self, value):
        """Add ``value`` to the tree."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        cur = self._root
        while True:
            if cur.value < value:
                if cur.right is None:
                    cur.right = node
                    return
                cur = cur.right
            else:
                if cur.left is None:
                    cur.left = node
                    return
                cur = cur.left

    def preorder(self):
        """Return the values node, left subtree, right subtree."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return result

    def inorder(self):
        """Return the values in ascending order."""
        result = []
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self):
        """Return the values left subtree, right subtree, node."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        result.reverse()
        return result

    def __contains__(self, value):
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False
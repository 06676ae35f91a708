"""Binary search trees: a set-like tree and a tree that keeps duplicates."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """A binary search tree holding each value at most once."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> None:
        """Insert ``data`` recursively; a value already present is ignored."""
        self.root = self._insert(self.root, data)

    @classmethod
    def _insert(cls, node: Node | None, data: int) -> Node:
        if node is None:
            return Node(data)
        if data < node.data:
            node.left = cls._insert(node.left, data)
        elif data > node.data:
            node.right = cls._insert(node.right, data)
        return node

    def insert_iterative(self, data: int) -> None:
        """Insert ``data`` without recursion; a value already present is ignored."""
        if self.root is None:
            self.root = Node(data)
            return
        node = self.root
        while node.data != data:
            if node.data > data:
                if node.left is None:
                    node.left = Node(data)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(data)
                    return
                node = node.right

    def __contains__(self, x: object) -> bool:
        node = self.root
        while node is not None and node.data != x:
            node = node.right if node.data < x else node.left
        return node is not None

    def contains_recursive(self, x: int) -> bool:
        """Membership test that walks the tree recursively."""
        return self._contains(self.root, x)

    @classmethod
    def _contains(cls, node: Node | None, x: int) -> bool:
        if node is None:
            return False
        if node.data == x:
            return True
        return cls._contains(node.right if node.data < x else node.left, x)

    def delete(self, x: int) -> None:
        """Remove ``x`` if present, using the in-order successor for two children.

        Removing a value that is not in the tree does nothing.
        """
        parent: Node | None = None
        node = self.root
        while node is not None and node.data != x:
            parent, node = node, (node.right if node.data < x else node.left)
        if node is None:
            return

        if node.right is None:
            self._replace_child(parent, node, node.left)
            return

        successor_parent, successor = node, node.right
        while successor.left is not None:
            successor_parent, successor = successor, successor.left
        node.data = successor.data
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right

    def _replace_child(self, parent: Node | None, old: Node, new: Node | None) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def pre_order_with_gaps(self) -> list[int | None]:
        """Pre-order values, with ``None`` standing for each empty subtree."""
        result: list[int | None] = []
        stack: list[Node | None] = [self.root]
        while stack:
            node = stack.pop()
            if node is None:
                result.append(None)
            else:
                result.append(node.data)
                stack.append(node.right)
                stack.append(node.left)
        return result


class MultiTree:
    """A binary tree ordered like a search tree that keeps duplicate values.

    Equal values are placed in the right subtree.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> None:
        """Attach ``data`` as a new leaf."""
        new = Node(data)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if node.data > data:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def pre_order(self) -> list[int]:
        return list(self._pre(self.root))

    def in_order(self) -> list[int]:
        return list(self._in(self.root))

    def post_order(self) -> list[int]:
        return list(self._post(self.root))

    @classmethod
    def _pre(cls, node: Node | None) -> Iterator[int]:
        if node is not None:
            yield node.data
            yield from cls._pre(node.left)
            yield from cls._pre(node.right)

    @classmethod
    def _in(cls, node: Node | None) -> Iterator[int]:
        if node is not None:
            yield from cls._in(node.left)
            yield node.data
            yield from cls._in(node.right)

    @classmethod
    def _post(cls, node: Node | None) -> Iterator[int]:
        if node is not None:
            yield from cls._post(node.left)
            yield from cls._post(node.right)
            yield node.data

    def levels(self) -> list[list[int]]:
        """Values grouped by depth, found breadth first."""
        result: list[list[int]] = []
        queue: deque[Node] = deque([self.root] if self.root is not None else [])
        while queue:
            level = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.data)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            result.append(level)
        return result
"""A complete binary tree stored level by level in a bounded list."""

from __future__ import annotations

from typing import Iterable, Iterator


class ArrayTree:
    """Complete binary tree: the children of slot ``i`` are ``2i+1`` and ``2i+2``."""

    def __init__(self, values: Iterable[int] = (), capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> bool:
        """Append ``data`` at the next free slot; return False when the tree is full."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(data)
        return True

    def __len__(self) -> int:
        return len(self._items)

    def _pre(self, index: int) -> Iterator[int]:
        if index < len(self._items):
            yield self._items[index]
            yield from self._pre(index * 2 + 1)
            yield from self._pre(index * 2 + 2)

    def _in(self, index: int) -> Iterator[int]:
        if index < len(self._items):
            yield from self._in(index * 2 + 1)
            yield self._items[index]
            yield from self._in(index * 2 + 2)

    def _post(self, index: int) -> Iterator[int]:
        if index < len(self._items):
            yield from self._post(index * 2 + 1)
            yield from self._post(index * 2 + 2)
            yield self._items[index]

    def pre_order(self) -> list[int]:
        return list(self._pre(0))

    def in_order(self) -> list[int]:
        return list(self._in(0))

    def post_order(self) -> list[int]:
        return list(self._post(0))

    def levels(self) -> list[list[int]]:
        """Values grouped by depth; level ``k`` holds up to ``2**k`` values."""
        result: list[list[int]] = []
        start, width = 0, 1
        while start < len(self._items):
            result.append(self._items[start:start + width])
            start += width
            width *= 2
        return result
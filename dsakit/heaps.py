"""Bounded binary heaps, bottom-up heap construction and heap sort."""

from __future__ import annotations

from typing import Callable, Iterable

DEFAULT_CAPACITY = 10

_Order = Callable[[int, int], bool]


def _less(a: int, b: int) -> bool:
    return a < b


def _greater(a: int, b: int) -> bool:
    return a > b


def _sift_up(items: list[int], data: int, higher: _Order) -> None:
    """Append ``data`` and move it up while it outranks its parent."""
    items.append(data)
    child = len(items) - 1
    while child > 0:
        parent = (child - 1) // 2
        if not higher(data, items[parent]):
            break
        items[child] = items[parent]
        child = parent
    items[child] = data


def _pop_top(items: list[int], higher: _Order) -> int:
    """Remove and return the top value, refilling the root from the last slot."""
    if not items:
        raise IndexError("pop from an empty heap")
    top = items[0]
    data = items.pop()
    if items:
        size = len(items)
        parent = 0
        while True:
            left = parent * 2 + 1
            if left >= size:
                break
            right = left + 1
            child = right if right < size and higher(items[right], items[left]) else left
            if not higher(items[child], data):
                break
            items[parent] = items[child]
            parent = child
        items[parent] = data
    return top


class MinHeap:
    """A bounded min-heap: the smallest value is removed first."""

    def __init__(self, values: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> bool:
        """Add ``data``; return False and leave the heap unchanged when it is full."""
        if len(self._items) >= self.capacity:
            return False
        _sift_up(self._items, data, _less)
        return True

    def delete_min(self) -> int:
        """Remove and return the smallest value; raise IndexError when empty."""
        return _pop_top(self._items, _less)

    def __len__(self) -> int:
        return len(self._items)

    def drain(self) -> list[int]:
        """All values in removal order, leaving this heap untouched."""
        items = list(self._items)
        return [_pop_top(items, _less) for _ in range(len(items))]


class MaxHeap:
    """A bounded max-heap: the largest value is removed first."""

    def __init__(self, values: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> bool:
        """Add ``data``; return False and leave the heap unchanged when it is full."""
        if len(self._items) >= self.capacity:
            return False
        _sift_up(self._items, data, _greater)
        return True

    def delete_max(self) -> int:
        """Remove and return the largest value; raise IndexError when empty."""
        return _pop_top(self._items, _greater)

    def __len__(self) -> int:
        return len(self._items)

    def drain(self) -> list[int]:
        """All values in removal order, leaving this heap untouched."""
        items = list(self._items)
        return [_pop_top(items, _greater) for _ in range(len(items))]


def heapify_max(values: list[int]) -> None:
    """Rearrange ``values`` in place into max-heap order, bottom up."""
    size = len(values)
    for start in range(size // 2 - 1, -1, -1):
        parent = start
        while True:
            largest = parent
            left = parent * 2 + 1
            right = left + 1
            if left < size and values[largest] < values[left]:
                largest = left
            if right < size and values[largest] < values[right]:
                largest = right
            if largest == parent:
                break
            values[parent], values[largest] = values[largest], values[parent]
            parent = largest


def _max_heapify(values: list[int], size: int, parent: int) -> None:
    largest = parent
    left = parent * 2 + 1
    right = left + 1
    if left < size and values[left] > values[largest]:
        largest = left
    if right < size and values[right] > values[largest]:
        largest = right
    if largest != parent:
        values[largest], values[parent] = values[parent], values[largest]
        _max_heapify(values, size, largest)


def _max_sift_down(values: list[int], size: int, parent: int) -> None:
    temp = values[parent]
    while True:
        left = parent * 2 + 1
        if left >= size:
            break
        right = left + 1
        child = right if right < size and values[right] > values[left] else left
        if not temp < values[child]:
            break
        values[parent] = values[child]
        parent = child
    values[parent] = temp


def _heap_sort(values: list[int], sift: Callable[[list[int], int, int], None]) -> None:
    size = len(values)
    for index in range((size - 1) // 2, -1, -1):
        sift(values, size, index)
    for last in range(size - 1, 0, -1):
        values[0], values[last] = values[last], values[0]
        sift(values, last, 0)


def heap_sort(values: list[int]) -> None:
    """Sort ``values`` ascending in place, using a recursive max-heapify."""
    _heap_sort(values, _max_heapify)


def heap_sort_iterative(values: list[int]) -> None:
    """Sort ``values`` ascending in place, sifting down without recursion."""
    _heap_sort(values, _max_sift_down)
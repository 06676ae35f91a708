"""Minimum-cost spanning trees by Prim's algorithm, with and without a heap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from dsakit.flights import DisconnectedGraphError
from dsakit.shortest_paths import WeightedList, WeightedMatrix

DEFAULT_CAPACITY = 20
NOT_CONNECTED = "GRAPH NOT CONNECTED."


@dataclass(frozen=True)
class Edge:
    """An edge between ``u`` and ``v`` with its weight."""

    u: int
    v: int
    weight: int


@dataclass
class SpanningTree:
    """The edges of a spanning tree, in the order they were chosen, and their total."""

    edges: list[Edge] = field(default_factory=list)
    cost: int = 0


class EdgeHeap:
    """A bounded min-heap of edges keyed on weight."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._edges: list[Edge] = []

    def insert(self, edge: Edge) -> bool:
        """Add ``edge``; return False and leave the heap unchanged when it is full."""
        if len(self._edges) >= self.capacity:
            return False
        edges = self._edges
        edges.append(edge)
        child = len(edges) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not edges[parent].weight > edge.weight:
                break
            edges[child] = edges[parent]
            child = parent
        edges[child] = edge
        return True

    def _sift_down(self, parent: int) -> None:
        edges = self._edges
        size = len(edges)
        while True:
            smallest = parent
            left = parent * 2 + 1
            right = left + 1
            if left < size and edges[left].weight < edges[smallest].weight:
                smallest = left
            if right < size and edges[right].weight < edges[smallest].weight:
                smallest = right
            if smallest == parent:
                return
            edges[smallest], edges[parent] = edges[parent], edges[smallest]
            parent = smallest

    def pop_min(self) -> Edge:
        """Remove and return the lightest edge; raise IndexError when empty."""
        if not self._edges:
            raise IndexError("pop from an empty heap")
        top = self._edges[0]
        last = self._edges.pop()
        if self._edges:
            self._edges[0] = last
            self._sift_down(0)
        return top

    def __len__(self) -> int:
        return len(self._edges)

    def weights(self) -> list[int]:
        """Edge weights in heap storage order."""
        return [edge.weight for edge in self._edges]


def _check_start(size: int, start: int) -> None:
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} out of range 0..{size - 1}")


def prims_matrix(matrix: WeightedMatrix, start: int) -> SpanningTree:
    """Grow a tree from ``start`` by scanning the matrix for the lightest crossing edge.

    Among equally light edges the first found, by visited vertex then by
    target vertex in ascending order, is taken. Raises DisconnectedGraphError
    when some vertex cannot be reached.
    """
    _check_start(matrix.size, start)
    tree = SpanningTree()
    visited = {start}
    while len(tree.edges) < matrix.size - 1:
        best: Edge | None = None
        for i in sorted(visited):
            for j in range(matrix.size):
                if j in visited:
                    continue
                weight = matrix.weight(i, j)
                if weight is not None and (best is None or weight < best.weight):
                    best = Edge(i, j, weight)
        if best is None:
            raise DisconnectedGraphError(NOT_CONNECTED)
        tree.edges.append(best)
        tree.cost += best.weight
        visited.add(best.v)
    return tree


def _grow(size: int, start: int, heap: EdgeHeap,
          candidates: "callable[[int], Iterable[tuple[int, int]]]") -> SpanningTree:
    tree = SpanningTree()
    visited = {start}
    for label, weight in candidates(start):
        heap.insert(Edge(start, label, weight))
    while len(tree.edges) < size - 1:
        if not len(heap):
            raise DisconnectedGraphError(NOT_CONNECTED)
        edge = heap.pop_min()
        if (edge.u in visited) == (edge.v in visited):
            continue
        tree.edges.append(edge)
        tree.cost += edge.weight
        new = edge.v if edge.u in visited else edge.u
        visited.add(new)
        for label, weight in candidates(new):
            if label not in visited:
                heap.insert(Edge(new, label, weight))
    return tree


def prims_heap_matrix(matrix: WeightedMatrix, start: int) -> SpanningTree:
    """Prim's algorithm on a matrix, keeping crossing edges in an EdgeHeap.

    Raises DisconnectedGraphError when some vertex cannot be reached.
    """
    _check_start(matrix.size, start)

    def candidates(u: int) -> list[tuple[int, int]]:
        return [
            (i, weight)
            for i in range(matrix.size)
            if (weight := matrix.weight(u, i)) is not None
        ]

    heap = EdgeHeap(max(DEFAULT_CAPACITY, matrix.size * matrix.size))
    return _grow(matrix.size, start, heap, candidates)


def prims_heap_list(graph: WeightedList, start: int) -> SpanningTree:
    """Prim's algorithm on neighbour lists, keeping crossing edges in an EdgeHeap.

    Raises DisconnectedGraphError when some vertex cannot be reached.
    """
    _check_start(graph.size, start)
    entries = sum(len(graph.neighbors(u)) for u in range(graph.size))
    heap = EdgeHeap(max(DEFAULT_CAPACITY, entries))
    return _grow(graph.size, start, heap, graph.neighbors)
"""Weighted graphs and shortest-path algorithms: Dijkstra, Floyd and Warshall."""

from __future__ import annotations

import math
from typing import Sequence

INF = 9999
DEFAULT_SIZE = 5

_Cost = float


def _check_vertex(size: int, vertex: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} out of range 0..{size - 1}")


class WeightedMatrix:
    """An undirected weighted graph kept as a matrix; ``inf`` marks a missing edge."""

    def __init__(self, size: int = DEFAULT_SIZE, inf: int = INF) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.inf = inf
        self._cells = [[inf] * size for _ in range(size)]

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``."""
        _check_vertex(self.size, u)
        _check_vertex(self.size, v)
        self._cells[u][v] = weight
        self._cells[v][u] = weight

    def weight(self, u: int, v: int) -> int | None:
        """The weight of the edge from ``u`` to ``v``, or None when there is none."""
        _check_vertex(self.size, u)
        _check_vertex(self.size, v)
        cell = self._cells[u][v]
        return None if cell == self.inf else cell

    def _costs(self) -> list[list[_Cost]]:
        return [[math.inf if cell == self.inf else cell for cell in row] for row in self._cells]

    def render(self) -> str:
        """The matrix as lines of right-aligned weights, ``INF`` for no edge."""
        return "\n".join(
            " ".join("INF" if cell == self.inf else f"{cell:3d}" for cell in row)
            for row in self._cells
        )


class WeightedList:
    """An undirected weighted graph kept as neighbour lists, newest neighbour first."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._lists: list[list[tuple[int, int]]] = [[] for _ in range(size)]

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``."""
        _check_vertex(self.size, u)
        _check_vertex(self.size, v)
        self._lists[u].insert(0, (v, weight))
        self._lists[v].insert(0, (u, weight))

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        """``(vertex, weight)`` pairs for the neighbours of ``u`` in list order."""
        _check_vertex(self.size, u)
        return list(self._lists[u])


def _finite(values: Sequence[_Cost]) -> list[int | None]:
    return [None if value == math.inf else int(value) for value in values]


def dijkstra_matrix(matrix: WeightedMatrix, root: int) -> list[int | None]:
    """Shortest distances from ``root``; None for a vertex that cannot be reached."""
    _check_vertex(matrix.size, root)
    costs = matrix._costs()
    dist = list(costs[root])
    dist[root] = 0
    visited = {root}
    for _ in range(matrix.size - 1):
        nearest = min(
            (j for j in range(matrix.size) if j not in visited), key=dist.__getitem__
        )
        visited.add(nearest)
        for k, edge in enumerate(costs[nearest]):
            if k not in visited:
                dist[k] = min(dist[k], dist[nearest] + edge)
    return _finite(dist)


def dijkstra_list(graph: WeightedList, root: int) -> list[int | None]:
    """Shortest distances from ``root``; None for a vertex that cannot be reached.

    Where a vertex has several edges to the same neighbour, the first one in
    its list is used when relaxing.
    """
    _check_vertex(graph.size, root)
    dist: list[_Cost] = [math.inf] * graph.size
    for label, weight in graph.neighbors(root):
        dist[label] = weight
    dist[root] = 0
    visited = {root}
    for _ in range(graph.size - 1):
        candidates = [
            j for j in range(graph.size) if j not in visited and dist[j] < math.inf
        ]
        if not candidates:
            continue
        nearest = min(candidates, key=dist.__getitem__)
        visited.add(nearest)
        first: dict[int, int] = {}
        for label, weight in graph.neighbors(nearest):
            first.setdefault(label, weight)
        for label, weight in first.items():
            if label not in visited and dist[nearest] + weight < dist[label]:
                dist[label] = dist[nearest] + weight
    return _finite(dist)


def floyd(matrix: WeightedMatrix) -> list[list[int | None]]:
    """All-pairs shortest distances; None where no path exists."""
    weights = matrix._costs()
    for i, row in enumerate(weights):
        row[i] = 0
    for k in range(matrix.size):
        through = weights[k]
        for row in weights:
            via = row[k]
            for j, onward in enumerate(through):
                if via + onward < row[j]:
                    row[j] = via + onward
    return [_finite(row) for row in weights]


def warshall(matrix: WeightedMatrix) -> list[list[bool]]:
    """Reachability: ``result[i][j]`` is True when a path of one or more edges leads from i to j.

    Every cell that is not ``inf`` off the diagonal counts as an edge.
    """
    costs = matrix._costs()
    reach = [
        [i != j and cost < math.inf for j, cost in enumerate(row)]
        for i, row in enumerate(costs)
    ]
    for k in range(matrix.size):
        through = reach[k]
        for row in reach:
            if row[k]:
                for j, onward in enumerate(through):
                    if onward:
                        row[j] = True
    return reach


def format_distances(distances: Sequence[int | None], root: int) -> str:
    """A report of the distances from ``root``, ``NONE`` for unreachable vertices."""
    lines = [f"Dijkstra's Paths from {root}:"]
    for i, distance in enumerate(distances):
        shown = "NONE" if distance is None else str(distance)
        lines.append(f"Path from {root} to {i}: {shown}")
    return "\n".join(lines)
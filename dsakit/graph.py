"""Unweighted graphs stored as an adjacency matrix or as adjacency lists."""

from __future__ import annotations

DEFAULT_SIZE = 5


def _check_vertex(size: int, vertex: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} out of range 0..{size - 1}")


class AdjacencyMatrix:
    """A graph on vertices ``0 .. size-1`` kept as a 0/1 matrix."""

    def __init__(self, size: int = DEFAULT_SIZE, directed: bool = True) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.directed = directed
        self._cells = [[0] * size for _ in range(size)]

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` to ``v``; an undirected graph also connects ``v`` to ``u``."""
        _check_vertex(self.size, u)
        _check_vertex(self.size, v)
        self._cells[u][v] = 1
        if not self.directed:
            self._cells[v][u] = 1

    def has_edge(self, u: int, v: int) -> bool:
        """Whether the matrix holds an edge from ``u`` to ``v``."""
        _check_vertex(self.size, u)
        _check_vertex(self.size, v)
        return self._cells[u][v] != 0

    def edges(self) -> list[tuple[int, int]]:
        """Edges in row order; an undirected edge is listed once, smaller end first."""
        return [
            (i, j)
            for i, row in enumerate(self._cells)
            for j, cell in enumerate(row)
            if cell == 1 and (self.directed or j > i)
        ]

    def render(self) -> str:
        """The matrix as lines of space-separated 0s and 1s."""
        return "\n".join(" ".join(str(cell) for cell in row) for row in self._cells)


class AdjacencyList:
    """A graph on vertices ``0 .. size-1`` kept as neighbour lists.

    A new neighbour goes to the front of its list, so lists read newest first.
    """

    def __init__(self, size: int = DEFAULT_SIZE, directed: bool = True) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.directed = directed
        self._lists: list[list[int]] = [[] for _ in range(size)]

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` to ``v``; an undirected graph also connects ``v`` to ``u``."""
        _check_vertex(self.size, u)
        _check_vertex(self.size, v)
        self._lists[u].insert(0, v)
        if not self.directed:
            self._lists[v].insert(0, u)

    def neighbors(self, u: int) -> list[int]:
        """The neighbours of ``u`` in list order."""
        _check_vertex(self.size, u)
        return list(self._lists[u])

    def edges(self) -> list[tuple[int, int]]:
        """Edges by source vertex; an undirected edge is listed once, smaller end first."""
        return [
            (i, label)
            for i, labels in enumerate(self._lists)
            for label in labels
            if self.directed or label > i
        ]

    def render(self) -> str:
        """One ``Node i: ...`` line per vertex, ``EMPTY`` for no neighbours."""
        lines = []
        for i, labels in enumerate(self._lists):
            body = " ".join(str(label) for label in labels) if labels else "EMPTY"
            lines.append(f"Node {i}: {body}")
        return "\n".join(lines)
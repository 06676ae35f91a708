"""Breadth-first and depth-first traversals of unweighted graphs."""

from __future__ import annotations

from collections import deque
from typing import Callable

from dsakit.graph import AdjacencyList, AdjacencyMatrix


def _check_root(size: int, root: int) -> None:
    if not 0 <= root < size:
        raise IndexError(f"vertex {root} out of range 0..{size - 1}")


def _bfs(size: int, root: int, neighbours: Callable[[int], list[int]]) -> list[int]:
    _check_root(size, root)
    visited = {root}
    queue = deque([root])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for label in neighbours(node):
            if label not in visited:
                visited.add(label)
                queue.append(label)
    return order


def _dfs(size: int, root: int, neighbours: Callable[[int], list[int]]) -> list[int]:
    _check_root(size, root)
    visited: set[int] = set()
    order: list[int] = []

    def visit(node: int) -> None:
        order.append(node)
        visited.add(node)
        for label in neighbours(node):
            if label not in visited:
                visit(label)

    visit(root)
    return order


def _matrix_neighbours(graph: AdjacencyMatrix) -> Callable[[int], list[int]]:
    return lambda node: [i for i in range(graph.size) if graph.has_edge(node, i)]


def bfs_list(graph: AdjacencyList, root: int) -> list[int]:
    """Vertices in breadth-first order, neighbours taken in list order."""
    return _bfs(graph.size, root, graph.neighbors)


def bfs_matrix(graph: AdjacencyMatrix, root: int) -> list[int]:
    """Vertices in breadth-first order, neighbours taken in ascending order."""
    return _bfs(graph.size, root, _matrix_neighbours(graph))


def dfs_list(graph: AdjacencyList, root: int) -> list[int]:
    """Vertices in recursive depth-first order, neighbours taken in list order."""
    return _dfs(graph.size, root, graph.neighbors)


def dfs_matrix(graph: AdjacencyMatrix, root: int) -> list[int]:
    """Vertices in recursive depth-first order, neighbours taken in ascending order."""
    return _dfs(graph.size, root, _matrix_neighbours(graph))


def dfs_matrix_iterative(graph: AdjacencyMatrix, root: int) -> list[int]:
    """Depth-first order using an explicit stack.

    The stack holds at most ``graph.size`` entries; pushes beyond that are
    dropped.
    """
    _check_root(graph.size, root)
    limit = graph.size
    stack = [root]
    visited: set[int] = set()
    order: list[int] = []
    while stack:
        top = stack.pop()
        if top in visited:
            continue
        order.append(top)
        visited.add(top)
        for i in reversed(range(graph.size)):
            if graph.has_edge(top, i) and i not in visited and len(stack) < limit:
                stack.append(i)
    return order
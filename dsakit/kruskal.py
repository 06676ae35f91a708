"""Minimum-cost spanning trees by Kruskal's algorithm.

Three variants are offered: a heap of edges read from neighbour lists, a heap
of edges read from a matrix, and a sorted list of edges read from a matrix.
On a graph that is not connected each variant returns a spanning forest
instead of raising.
"""

from __future__ import annotations

from typing import Iterable

from dsakit.prims import DEFAULT_CAPACITY, Edge, EdgeHeap, SpanningTree
from dsakit.shortest_paths import WeightedList, WeightedMatrix


def _matrix_edges(matrix: WeightedMatrix) -> list[Edge]:
    """Each undirected edge once, smaller end first, in row-major order."""
    return [
        Edge(i, j, weight)
        for i in range(matrix.size)
        for j in range(i + 1, matrix.size)
        if (weight := matrix.weight(i, j)) is not None
    ]


def _list_edges(graph: WeightedList) -> list[Edge]:
    """Each undirected edge once, smaller end first, by vertex then list order."""
    return [
        Edge(i, label, weight)
        for i in range(graph.size)
        for label, weight in graph.neighbors(i)
        if label > i
    ]


def _fill_heap(edges: list[Edge]) -> EdgeHeap:
    heap = EdgeHeap(max(DEFAULT_CAPACITY, len(edges)))
    for edge in edges:
        heap.insert(edge)
    return heap


def _drain(heap: EdgeHeap) -> Iterable[Edge]:
    while len(heap):
        yield heap.pop_min()


def _choose(size: int, edges: Iterable[Edge]) -> list[Edge]:
    """Accept each edge joining two different components, in the given order."""
    component = list(range(size))
    chosen: list[Edge] = []
    for edge in edges:
        keep, change = component[edge.u], component[edge.v]
        if keep == change:
            continue
        chosen.append(edge)
        component = [keep if label == change else label for label in component]
    return chosen


def _tree(edges: list[Edge]) -> SpanningTree:
    return SpanningTree(edges=edges, cost=sum(edge.weight for edge in edges))


def sorted_edges(matrix: WeightedMatrix) -> list[Edge]:
    """All edges of ``matrix`` by ascending weight.

    Among edges of equal weight, the one found later in a row-major scan of
    the upper triangle comes first.
    """
    edges = _matrix_edges(matrix)
    edges.reverse()
    edges.sort(key=lambda edge: edge.weight)
    return edges


def kruskal_heap_list(graph: WeightedList) -> SpanningTree:
    """Kruskal's algorithm over neighbour lists, drawing edges from an EdgeHeap.

    Edges are listed in the order they were chosen.
    """
    heap = _fill_heap(_list_edges(graph))
    return _tree(_choose(graph.size, _drain(heap)))


def kruskal_heap_matrix(matrix: WeightedMatrix) -> SpanningTree:
    """Kruskal's algorithm over a matrix, drawing edges from an EdgeHeap.

    Edges are listed in the order they were chosen.
    """
    heap = _fill_heap(_matrix_edges(matrix))
    return _tree(_choose(matrix.size, _drain(heap)))


def kruskal_edge_list(matrix: WeightedMatrix) -> SpanningTree:
    """Kruskal's algorithm over a matrix, walking the list from ``sorted_edges``.

    Edges are listed with the most recently chosen one first.
    """
    chosen = _choose(matrix.size, sorted_edges(matrix))
    chosen.reverse()
    return _tree(chosen)
import pytest

from dsakit.flights import DisconnectedGraphError, Flight, kruskal_mst
from dsakit.prims import (
    Edge,
    EdgeHeap,
    SpanningTree,
    prims_heap_list,
    prims_heap_matrix,
    prims_matrix,
)
from dsakit.shortest_paths import WeightedList, WeightedMatrix

FIVE_EDGES = [(0, 1, 2), (0, 2, 4), (1, 2, 1), (1, 3, 7), (2, 4, 3), (4, 3, 2)]
SIX_EDGES = [
    (1, 0, 1), (1, 2, 5), (1, 5, 6), (5, 0, 5), (2, 0, 4),
    (4, 5, 3), (4, 3, 1), (2, 3, 2), (4, 0, 6), (3, 0, 4),
]


def make_matrix(size, edges, inf=9999):
    matrix = WeightedMatrix(size, inf)
    for u, v, w in edges:
        matrix.add_edge(u, v, w)
    return matrix


def make_list(size, edges):
    graph = WeightedList(size)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


def kruskal_cost(size, edges):
    _, total = kruskal_mst([Flight(u, v, w) for u, v, w in edges], size)
    return total


def assert_spanning(tree, size, edges):
    assert isinstance(tree, SpanningTree)
    assert len(tree.edges) == size - 1
    assert tree.cost == sum(edge.weight for edge in tree.edges)
    covered = {e.u for e in tree.edges} | {e.v for e in tree.edges}
    assert covered == set(range(size))
    allowed = {frozenset((u, v)): w for u, v, w in edges}
    for edge in tree.edges:
        assert allowed[frozenset((edge.u, edge.v))] == edge.weight


def test_prims_matrix_example_order():
    tree = prims_matrix(make_matrix(5, FIVE_EDGES), 0)
    assert tree.edges == [Edge(0, 1, 2), Edge(1, 2, 1), Edge(2, 4, 3), Edge(4, 3, 2)]
    assert tree.cost == 8


@pytest.mark.parametrize("start", range(5))
def test_prims_matrix_is_minimal_from_any_start(start):
    tree = prims_matrix(make_matrix(5, FIVE_EDGES), start)
    assert_spanning(tree, 5, FIVE_EDGES)
    assert tree.cost == kruskal_cost(5, FIVE_EDGES)


def test_heap_versions_on_six_vertex_example():
    matrix_tree = prims_heap_matrix(make_matrix(6, SIX_EDGES, inf=999), 0)
    list_tree = prims_heap_list(make_list(6, SIX_EDGES), 0)
    assert matrix_tree.cost == 11
    assert list_tree.cost == matrix_tree.cost
    assert_spanning(matrix_tree, 6, SIX_EDGES)
    assert_spanning(list_tree, 6, SIX_EDGES)


@pytest.mark.parametrize("start", range(6))
def test_all_versions_agree(start):
    expected = kruskal_cost(6, SIX_EDGES)
    assert prims_matrix(make_matrix(6, SIX_EDGES), start).cost == expected
    assert prims_heap_matrix(make_matrix(6, SIX_EDGES), start).cost == expected
    assert prims_heap_list(make_list(6, SIX_EDGES), start).cost == expected


def test_first_edge_is_lightest_from_start():
    tree = prims_heap_list(make_list(6, SIX_EDGES), 0)
    assert tree.edges[0] == Edge(0, 1, 1)


@pytest.mark.parametrize(
    "algorithm, build",
    [
        (prims_matrix, lambda: make_matrix(5, [(0, 1, 3)])),
        (prims_heap_matrix, lambda: make_matrix(5, [(0, 1, 3)])),
        (prims_heap_list, lambda: make_list(5, [(0, 1, 3)])),
    ],
)
def test_disconnected_graph_raises(algorithm, build):
    with pytest.raises(DisconnectedGraphError):
        algorithm(build(), 0)


@pytest.mark.parametrize("algorithm, build", [
    (prims_matrix, lambda: make_matrix(5, FIVE_EDGES)),
    (prims_heap_matrix, lambda: make_matrix(5, FIVE_EDGES)),
    (prims_heap_list, lambda: make_list(5, FIVE_EDGES)),
])
def test_bad_start_raises(algorithm, build):
    with pytest.raises(IndexError):
        algorithm(build(), 5)


def test_single_vertex_has_empty_tree():
    tree = prims_heap_matrix(WeightedMatrix(1), 0)
    assert tree.edges == []
    assert tree.cost == 0


def test_edge_heap_pops_in_weight_order():
    heap = EdgeHeap()
    weights = [5, 3, 8, 1, 9, 2, 7]
    for i, w in enumerate(weights):
        assert heap.insert(Edge(i, i + 1, w))
    assert len(heap) == len(weights)
    assert heap.weights()[0] == min(weights)
    popped = [heap.pop_min().weight for _ in range(len(weights))]
    assert popped == sorted(weights)
    assert len(heap) == 0


def test_edge_heap_capacity_limit():
    heap = EdgeHeap(2)
    assert heap.insert(Edge(0, 1, 4))
    assert heap.insert(Edge(1, 2, 6))
    assert heap.insert(Edge(2, 3, 1)) is False
    assert sorted(heap.weights()) == [4, 6]


def test_edge_heap_empty_pop_raises():
    with pytest.raises(IndexError):
        EdgeHeap().pop_min()


def test_edge_heap_negative_capacity_rejected():
    with pytest.raises(ValueError):
        EdgeHeap(-1)
import pytest

from dsakit.graph import AdjacencyList, AdjacencyMatrix
from dsakit.traversal import (
    bfs_list,
    bfs_matrix,
    dfs_list,
    dfs_matrix,
    dfs_matrix_iterative,
)

EDGES = [(0, 1), (1, 4), (1, 2), (2, 3), (3, 4)]


def build(cls, edges=EDGES, size=5):
    graph = cls(size, directed=False)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_bfs_matrix_sample():
    assert bfs_matrix(build(AdjacencyMatrix), 0) == [0, 1, 2, 4, 3]


def test_bfs_list_sample():
    assert bfs_list(build(AdjacencyList), 0) == [0, 1, 2, 4, 3]


def test_dfs_sample_all_variants_agree():
    expected = [0, 1, 2, 3, 4]
    assert dfs_matrix(build(AdjacencyMatrix), 0) == expected
    assert dfs_list(build(AdjacencyList), 0) == expected
    assert dfs_matrix_iterative(build(AdjacencyMatrix), 0) == expected


@pytest.mark.parametrize(
    "traverse, cls",
    [
        (bfs_list, AdjacencyList),
        (bfs_matrix, AdjacencyMatrix),
        (dfs_list, AdjacencyList),
        (dfs_matrix, AdjacencyMatrix),
        (dfs_matrix_iterative, AdjacencyMatrix),
    ],
)
@pytest.mark.parametrize("root", range(5))
def test_each_vertex_visited_once_from_any_root(traverse, cls, root):
    order = traverse(build(cls), root)
    assert order[0] == root
    assert sorted(order) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize(
    "traverse, cls",
    [
        (bfs_list, AdjacencyList),
        (bfs_matrix, AdjacencyMatrix),
        (dfs_list, AdjacencyList),
        (dfs_matrix, AdjacencyMatrix),
        (dfs_matrix_iterative, AdjacencyMatrix),
    ],
)
def test_unreachable_vertices_skipped(traverse, cls):
    graph = build(cls, edges=[(0, 1), (3, 4)])
    assert sorted(traverse(graph, 0)) == [0, 1]
    assert sorted(traverse(graph, 4)) == [3, 4]
    assert traverse(graph, 2) == [2]


def test_bfs_visits_by_distance():
    path = [(0, 1), (1, 2), (2, 3), (3, 4)]
    graph = build(AdjacencyMatrix, edges=path)
    assert bfs_matrix(graph, 2)[0] == 2
    assert set(bfs_matrix(graph, 2)[1:3]) == {1, 3}


def test_recursive_and_iterative_dfs_match_on_path():
    path = [(4, 3), (3, 2), (2, 1), (1, 0)]
    graph = build(AdjacencyMatrix, edges=path)
    for root in range(5):
        assert dfs_matrix(graph, root) == dfs_matrix_iterative(graph, root)


def test_dfs_goes_deep_before_wide():
    star_and_tail = [(0, 1), (0, 2), (1, 3)]
    graph = build(AdjacencyMatrix, edges=star_and_tail)
    order = dfs_matrix(graph, 0)
    assert order.index(3) < order.index(2)
    assert bfs_matrix(graph, 0).index(2) < bfs_matrix(graph, 0).index(3)


@pytest.mark.parametrize(
    "traverse, cls",
    [
        (bfs_list, AdjacencyList),
        (bfs_matrix, AdjacencyMatrix),
        (dfs_list, AdjacencyList),
        (dfs_matrix, AdjacencyMatrix),
        (dfs_matrix_iterative, AdjacencyMatrix),
    ],
)
def test_bad_root_raises(traverse, cls):
    with pytest.raises(IndexError):
        traverse(build(cls), 5)
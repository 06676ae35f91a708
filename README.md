# dsakit

A small collection of classic data structures and graph algorithms, written
in plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.bst` | `Node`; `BinarySearchTree` (each value at most once: `insert`, `insert_iterative`, `in`, `contains_recursive`, `delete` using the in-order successor, `pre_order_with_gaps`); `MultiTree` (search-tree ordering that keeps duplicates on the right, with `pre_order`, `in_order`, `post_order` and `levels`) |
| `dsakit.parent_pointer` | `ParentPointerTree`, a fixed-size tree where each slot records its parent index; `path_from_root` lists the values below the root down to a slot |
| `dsakit.array_tree` | `ArrayTree`, a bounded complete binary tree stored level by level, with the three depth-first orders and `levels` |
| `dsakit.huffman` | `HuffmanNode`, `normalize_weights`, `build_tree`, `codes`, `pre_order` |
| `dsakit.heaps` | bounded `MinHeap` and `MaxHeap` (default capacity 10), `heapify_max`, in-place `heap_sort` and `heap_sort_iterative` |
| `dsakit.tasks` | `Task`, `TaskQueue` (a min-heap of tasks by duration whose capacity doubles as needed), `format_queue`, and the `dsakit-tasks` command |
| `dsakit.graph` | unweighted `AdjacencyMatrix` and `AdjacencyList`, directed or undirected, with `add_edge`, `edges` and `render` |
| `dsakit.traversal` | `bfs_list`, `bfs_matrix`, `dfs_list`, `dfs_matrix`, `dfs_matrix_iterative` |
| `dsakit.shortest_paths` | undirected `WeightedMatrix` and `WeightedList`, `dijkstra_matrix`, `dijkstra_list`, `floyd`, `warshall`, `format_distances` |
| `dsakit.flights` | `Flight`, `DisjointSet` (path compression, union by rank), `DisconnectedGraphError`, `kruskal_mst`, and the `dsakit-flights` command |
| `dsakit.prims` | `Edge`, `EdgeHeap`, `SpanningTree`, `prims_matrix`, `prims_heap_matrix`, `prims_heap_list` |
| `dsakit.kruskal` | `sorted_edges`, `kruskal_heap_list`, `kruskal_heap_matrix`, `kruskal_edge_list` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Binary search tree:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([4, 2, 5, 2, 1])
print(2 in tree)                    # True
tree.delete(2)
print(tree.pre_order_with_gaps())   # None marks an empty subtree
```

Heaps and heap sort:

```python
from dsakit.heaps import MinHeap, heap_sort

heap = MinHeap([4, 2, 5, 2, 1])
print(heap.delete_min())            # 1
print(heap.drain())                 # [2, 2, 4, 5]

values = [4, 2, 5, 2, 1]
heap_sort(values)                   # sorts in place
print(values)                       # [1, 2, 2, 4, 5]
```

`MinHeap.insert` and `MaxHeap.insert` return `False` and leave the heap
unchanged once the capacity is reached; removing from an empty heap raises
`IndexError`.

Huffman codes:

```python
from dsakit.huffman import build_tree, codes, normalize_weights

weights = normalize_weights({"a": 5, "b": 2, "c": 1, "d": 1, "e": 1})
print(codes(build_tree(weights)))
```

Graph traversal:

```python
from dsakit.graph import AdjacencyList
from dsakit.traversal import bfs_list, dfs_list

graph = AdjacencyList(5, directed=False)
for u, v in [(0, 1), (1, 4), (1, 2), (2, 3), (3, 4)]:
    graph.add_edge(u, v)
print(bfs_list(graph, 0))
print(dfs_list(graph, 0))
```

New neighbours go to the front of a vertex's list, so list-based traversals
visit the most recently added neighbour first; matrix-based traversals visit
neighbours in ascending order.

Shortest paths and spanning trees:

```python
from dsakit.shortest_paths import WeightedMatrix, dijkstra_matrix, floyd
from dsakit.prims import prims_matrix
from dsakit.kruskal import kruskal_heap_matrix

matrix = WeightedMatrix(5, 9999)
for u, v, w in [(0, 1, 2), (0, 2, 4), (1, 2, 1), (1, 3, 7), (2, 4, 3), (4, 3, 2)]:
    matrix.add_edge(u, v, w)
print(dijkstra_matrix(matrix, 0))   # None for an unreachable vertex
print(floyd(matrix))
print(prims_matrix(matrix, 0).cost)
print(kruskal_heap_matrix(matrix).edges)
```

The Prim variants raise `DisconnectedGraphError` when some vertex cannot be
reached; the Kruskal variants in `dsakit.kruskal` return a spanning forest
instead, while `dsakit.flights.kruskal_mst` raises `DisconnectedGraphError`.

## Command-line tools

Two interactive programs are installed with the package. Both read their data
from standard input.

```
dsakit-tasks
```

asks for a number of tasks, then each task's name and duration in minutes,
and shows the queue as tasks are extracted shortest first.

```
dsakit-flights
```

asks for the number of cities and flights, then each flight's source,
destination and cost, and prints the cheapest set of flights that connects
every city, or reports that the cities cannot all be connected.

## What it does not do

Everything lives in memory: nothing is saved to or loaded from files, and the
graph and tree views are plain text from `render` and the traversal methods,
not drawings. Graphs have a fixed number of vertices chosen when they are
created.
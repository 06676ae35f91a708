"""Classic data structures and graph algorithms: trees, heaps, Huffman coding,
graph traversals, shortest paths and minimum spanning trees."""

__version__ = "0.1.0"

__all__ = [
    "array_tree",
    "bst",
    "flights",
    "graph",
    "heaps",
    "huffman",
    "kruskal",
    "parent_pointer",
    "prims",
    "shortest_paths",
    "tasks",
    "traversal",
]
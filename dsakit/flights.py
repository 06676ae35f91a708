"""Cheapest flight network: Kruskal's algorithm over a union-find structure."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Sequence

DISCONNECTED_MESSAGE = "The graph is not fully connected; MST cannot be formed."


@dataclass(frozen=True)
class Flight:
    """A flight between two cities and its cost."""

    source: int
    destination: int
    cost: int


class DisconnectedGraphError(ValueError):
    """Raised when the flights do not connect every city."""

    def __init__(self, message: str = DISCONNECTED_MESSAGE) -> None:
        super().__init__(message)


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, i: int) -> int:
        """The root of the set holding ``i``; compresses the path on the way."""
        if not 0 <= i < len(self.parent):
            raise IndexError(f"element {i} out of range")
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False when already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        else:
            self.parent[root_y] = root_x
            if self.rank[root_x] == self.rank[root_y]:
                self.rank[root_x] += 1
        return True


def kruskal_mst(flights: Iterable[Flight], num_cities: int) -> tuple[list[Flight], int]:
    """The cheapest set of flights joining all cities, and its total cost.

    Flights of equal cost are considered in their given order. Raises
    DisconnectedGraphError when the flights cannot join every city.
    """
    ordered = sorted(flights, key=lambda flight: flight.cost)
    sets = DisjointSet(num_cities)
    tree: list[Flight] = []
    total = 0
    for flight in ordered:
        if sets.union(flight.source, flight.destination):
            tree.append(flight)
            total += flight.cost
    if len(tree) + 1 != num_cities:
        raise DisconnectedGraphError()
    return tree, total


def _read_ints(prompt: str, count: int) -> list[int]:
    values: list[int] = []
    while len(values) < count:
        values.extend(int(token) for token in input(prompt).split())
        prompt = ""
    return values[:count]


def main(argv: Sequence[str] | None = None) -> int:
    """Read cities and flights from standard input and print the cheapest network."""
    parser = argparse.ArgumentParser(
        description="Find the cheapest set of flights joining all cities; data is read from standard input."
    )
    parser.parse_args(argv)

    try:
        (num_cities,) = _read_ints("Enter the number of cities: ", 1)
        (num_flights,) = _read_ints("Enter the number of flights: ", 1)
        flights = [
            Flight(*_read_ints(f"Enter source, destination, and cost for flight {n}: ", 3))
            for n in range(1, num_flights + 1)
        ]
    except (ValueError, EOFError) as error:
        print(f"\nInvalid input: {error}")
        return 1

    try:
        tree, total = kruskal_mst(flights, num_cities)
    except DisconnectedGraphError as error:
        print(error)
        return 0
    except IndexError as error:
        print(f"Invalid city: {error}")
        return 1

    print("Minimum Spanning Tree:")
    for flight in tree:
        print(f"Edge: {flight.source} - {flight.destination}, Cost: {flight.cost}")
    print(f"Total cost of the MST: {total}")
    return 0
"""Huffman code trees built from character weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

PARENT = "*"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; inner nodes carry the ``*`` character."""

    character: str
    weight: float
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def normalize_weights(weights: Mapping[str, float]) -> dict[str, float]:
    """Scale the weights so that they add up to 1."""
    total = sum(weights.values())
    if total == 0:
        raise ValueError("weights must not add up to zero")
    return {character: weight / total for character, weight in weights.items()}


def build_tree(weights: Mapping[str, float]) -> HuffmanNode | None:
    """Merge the two lightest trees until one is left; ``None`` for no symbols.

    The forest is kept with the newest tree first, and the first of the two
    chosen trees becomes the left child.
    """
    forest = [HuffmanNode(c, w) for c, w in reversed(list(weights.items()))]
    while len(forest) > 1:
        one, two = 0, 1
        for index, _ in enumerate(forest[2:], start=2):
            small = index
            if forest[small].weight < forest[one].weight:
                one, small = small, one
            if forest[small].weight < forest[two].weight:
                two, small = small, two
        first, second = forest[one], forest[two]
        merged = HuffmanNode(PARENT, first.weight + second.weight, first, second)
        forest = [tree for index, tree in enumerate(forest) if index not in (one, two)]
        forest.insert(0, merged)
    return forest[0] if forest else None


def codes(tree: HuffmanNode | None) -> dict[str, str]:
    """Bit strings for every leaf: ``0`` for a left branch, ``1`` for a right one."""
    result: dict[str, str] = {}

    def walk(node: HuffmanNode | None, prefix: str) -> None:
        if node is None:
            return
        if node.is_leaf:
            result[node.character] = prefix
        else:
            walk(node.left, prefix + "0")
            walk(node.right, prefix + "1")

    walk(tree, "")
    return result


def pre_order(tree: HuffmanNode | None) -> list[str | None]:
    """Characters in pre-order, with ``None`` standing for each empty subtree."""

    def walk(node: HuffmanNode | None) -> Iterator[str | None]:
        if node is None:
            yield None
        else:
            yield node.character
            yield from walk(node.left)
            yield from walk(node.right)

    return list(walk(tree))
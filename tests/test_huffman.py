import math

import pytest

from dsakit.huffman import HuffmanNode, build_tree, codes, normalize_weights, pre_order

WEIGHTS = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16}


def test_normalize_sums_to_one():
    normalized = normalize_weights(WEIGHTS)
    assert math.isclose(sum(normalized.values()), 1.0)
    assert list(normalized) == list(WEIGHTS)
    assert math.isclose(normalized["a"] * sum(WEIGHTS.values()), WEIGHTS["a"])


def test_normalize_zero_total_rejected():
    with pytest.raises(ValueError):
        normalize_weights({"a": 0, "b": 0})


def test_root_weight_is_total():
    tree = build_tree(normalize_weights(WEIGHTS))
    assert math.isclose(tree.weight, 1.0)


def test_two_symbols():
    tree = build_tree({"a": 1, "b": 2})
    assert codes(tree) == {"b": "0", "a": "1"}


def test_codes_cover_all_symbols_and_are_prefix_free():
    table = codes(build_tree(WEIGHTS))
    assert set(table) == set(WEIGHTS)
    words = list(table.values())
    for x in words:
        for y in words:
            if x != y:
                assert not y.startswith(x)


def test_heavier_symbols_get_no_longer_codes():
    table = codes(build_tree(WEIGHTS))
    ordered = sorted(WEIGHTS, key=WEIGHTS.get)
    lengths = [len(table[c]) for c in ordered]
    assert lengths == sorted(lengths, reverse=True)


def test_kraft_equality():
    table = codes(build_tree(WEIGHTS))
    assert math.isclose(sum(2 ** -len(code) for code in table.values()), 1.0)


def test_single_symbol():
    tree = build_tree({"z": 3})
    assert codes(tree) == {"z": ""}
    assert pre_order(tree) == ["z", None, None]


def test_empty_input():
    assert build_tree({}) is None
    assert codes(None) == {}
    assert pre_order(None) == [None]


def test_pre_order_shape():
    tree = build_tree(WEIGHTS)
    order = pre_order(tree)
    leaves = [c for c in order if c is not None and c != "*"]
    assert sorted(leaves) == sorted(WEIGHTS)
    assert order.count("*") == len(WEIGHTS) - 1
    assert order.count(None) == 2 * len(WEIGHTS)
    assert order[0] == "*"


def test_leaf_property():
    leaf = HuffmanNode("x", 1.0)
    inner = HuffmanNode("*", 2.0, leaf, HuffmanNode("y", 1.0))
    assert leaf.is_leaf is True
    assert inner.is_leaf is False
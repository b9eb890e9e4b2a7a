from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fgkhuff.tree import MAX_NODES, FGKTree


def _feed(tree, symbols):
    for symbol in symbols:
        leaf = tree.leaf_for(symbol)
        if leaf is None:
            leaf = tree.split_nyt(symbol)
        tree.update(leaf)


def test_fresh_tree_is_only_nyt():
    tree = FGKTree()
    assert tree.root is tree.nyt
    assert tree.root.order == MAX_NODES
    assert tree.root.weight == 0
    assert list(tree.nodes()) == [tree.root]


def test_split_nyt_orders_and_codes():
    tree = FGKTree()
    leaf = tree.split_nyt(65)
    assert leaf.symbol == 65
    assert leaf.order == MAX_NODES - 1
    assert tree.nyt.order == MAX_NODES - 2
    assert tree.leaf_for(65) is leaf
    assert tree.code_for(leaf) == [1]
    assert tree.code_for(tree.nyt) == [0]
    assert tree.code_for(tree.root) == []


def test_split_rejects_known_and_bad_symbols():
    tree = FGKTree()
    tree.split_nyt(3)
    with pytest.raises(ValueError):
        tree.split_nyt(3)
    with pytest.raises(ValueError):
        tree.split_nyt(256)


def test_unknown_symbol_has_no_leaf():
    assert FGKTree().leaf_for(7) is None


def test_update_counts_weights():
    tree = FGKTree()
    _feed(tree, b"aab")
    assert tree.root.weight == 3
    assert tree.leaf_for(ord("a")).weight == 2
    assert tree.leaf_for(ord("b")).weight == 1


def test_leaf_is_found_by_its_code():
    tree = FGKTree()
    _feed(tree, b"abracadabra")
    for symbol in set(b"abracadabra"):
        node = tree.root
        for bit in tree.code_for(tree.leaf_for(symbol)):
            node = node.right if bit else node.left
        assert node is tree.leaf_for(symbol)


@given(st.lists(st.integers(min_value=0, max_value=255), max_size=120))
def test_tree_invariants(symbols):
    tree = FGKTree()
    _feed(tree, symbols)
    nodes = list(tree.nodes())
    distinct = len(set(symbols))
    assert len(nodes) == 2 * distinct + 1
    assert len({node.order for node in nodes}) == len(nodes)
    assert tree.root.weight == len(symbols)
    for node in nodes:
        if node.is_leaf():
            continue
        assert node.weight == node.left.weight + node.right.weight
        assert node.left.parent is node and node.right.parent is node
    counts = Counter(symbols)
    for symbol, count in counts.items():
        assert tree.leaf_for(symbol).weight == count
    assert tree.nyt.is_leaf() and tree.nyt.weight == 0
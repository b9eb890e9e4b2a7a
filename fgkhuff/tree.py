"""The FGK adaptive Huffman tree."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterator, Optional

ALPHABET = 256
MAX_NODES = 2 * ALPHABET - 1


@dataclass(eq=False)
class Node:
    """A tree node; ``symbol`` is meaningful only for leaves."""

    symbol: int
    weight: int
    order: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _is_ancestor(upper: Node, lower: Optional[Node]) -> bool:
    """True when ``upper`` is ``lower`` or lies on its path to the root."""
    while lower is not None:
        if lower is upper:
            return True
        lower = lower.parent
    return False


class FGKTree:
    """Adaptive Huffman tree kept in order by the FGK update rule."""

    def __init__(self) -> None:
        self._leaves: dict[int, Node] = {}
        self._by_weight: defaultdict[int, set[Node]] = defaultdict(set)
        self.root = self._new_node(0, MAX_NODES)
        self.nyt = self.root

    def _new_node(self, symbol: int, order: int) -> Node:
        node = Node(symbol, 0, order)
        self._by_weight[0].add(node)
        return node

    def leaf_for(self, symbol: int) -> Optional[Node]:
        """Return the leaf of ``symbol`` or None if it has not been seen."""
        return self._leaves.get(symbol)

    def split_nyt(self, symbol: int) -> Node:
        """Give the NYT node two children: a new NYT and a leaf for ``symbol``."""
        if not 0 <= symbol < ALPHABET:
            raise ValueError(f"symbol out of range: {symbol}")
        if symbol in self._leaves:
            raise ValueError(f"symbol already in tree: {symbol}")
        old = self.nyt
        internal = self._new_node(0, old.order - 2)
        leaf = self._new_node(symbol, old.order - 1)
        old.left, internal.parent = internal, old
        old.right, leaf.parent = leaf, old
        self._leaves[symbol] = leaf
        self.nyt = internal
        return leaf

    def _leader(self, weight: int) -> Node:
        return max(self._by_weight[weight], key=lambda node: node.order)

    def _swap(self, a: Node, b: Node) -> None:
        if a is b or a.parent is None or b.parent is None:
            return
        if _is_ancestor(a, b) or _is_ancestor(b, a):
            return
        a_parent, b_parent = a.parent, b.parent
        a_on_left = a_parent.left is a
        b_on_left = b_parent.left is b
        if a_on_left:
            a_parent.left = b
        else:
            a_parent.right = b
        if b_on_left:
            b_parent.left = a
        else:
            b_parent.right = a
        a.parent, b.parent = b_parent, a_parent
        a.order, b.order = b.order, a.order

    def update(self, node: Node) -> None:
        """Count one more occurrence at ``node`` and restore the tree order."""
        current: Optional[Node] = node
        while current is not None:
            leader = self._leader(current.weight)
            if leader is not current and not _is_ancestor(current, leader):
                self._swap(current, leader)
            self._by_weight[current.weight].discard(current)
            current.weight += 1
            self._by_weight[current.weight].add(current)
            current = current.parent

    def code_for(self, node: Node) -> list[int]:
        """The path from the root to ``node``: 0 for left, 1 for right."""
        path = []
        while node is not self.root:
            parent = node.parent
            path.append(1 if node is parent.right else 0)
            node = parent
        path.reverse()
        return path

    def nodes(self) -> Iterator[Node]:
        """Every node of the tree, in pre-order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if node.left is not None:
                stack.append(node.right)
                stack.append(node.left)
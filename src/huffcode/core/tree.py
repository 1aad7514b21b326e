"""Huffman tree nodes and the owning tree handle.

A node is either a ``Leaf`` (one symbol) or an ``Internal`` merge point with
exactly two children. Trees are strictly tree-shaped: no sharing, no cycles.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Union

from huffcode.errors import TreeReleased


@dataclass(slots=True, eq=False)
class Leaf:
    symbol: Hashable
    weight: int


@dataclass(slots=True, eq=False)
class Internal:
    weight: int
    left: "Node"
    right: "Node"


Node = Union[Leaf, Internal]


def merge(left: Node, right: Node) -> Internal:
    """Nuovo nodo interno: peso = somma dei figli."""
    return Internal(weight=left.weight + right.weight, left=left, right=right)


def iter_leaves(root: Node) -> Iterator[Leaf]:
    """Yield leaves left to right (iterative, no recursion limit)."""
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def leaf_count(root: Node) -> int:
    return sum(1 for _ in iter_leaves(root))


def tree_height(root: Node) -> int:
    """Number of edges on the longest root-to-leaf path (0 for a single leaf)."""
    best = 0
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, Leaf):
            best = max(best, depth)
        else:
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
    return best


def format_tree(root: Node) -> str:
    """Parenthesised dump: ``(symbol:weight left right)``, ``*`` for internal nodes."""
    out: list[str] = []
    # "close" marker chiude la parentesi del nodo interno
    stack: list[Node | None] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            out.append(")")
            continue
        if isinstance(node, Leaf):
            out.append(f"({node.symbol}:{node.weight})")
            continue
        out.append(f"(*:{node.weight} ")
        stack.append(None)
        stack.append(node.right)
        stack.append(node.left)
    return "".join(out)


class HuffmanTree:
    """Owning handle for a built tree.

    Use as a context manager so the node graph is released on every exit path::

        with HuffmanTree(build_huffman_tree(forest)) as tree:
            codes = build_code_table(tree.root)
    """

    __slots__ = ("_root",)

    def __init__(self, root: Node) -> None:
        self._root: Node | None = root

    @property
    def root(self) -> Node:
        if self._root is None:
            raise TreeReleased("huffman tree already released")
        return self._root

    @property
    def closed(self) -> bool:
        return self._root is None

    @property
    def weight(self) -> int:
        return self.root.weight

    def leaves(self) -> list[Leaf]:
        return list(iter_leaves(self.root))

    def close(self) -> None:
        # Drops the only reference to the node graph; idempotent.
        self._root = None

    def __enter__(self) -> HuffmanTree:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._root is None:
            return "HuffmanTree(<released>)"
        return f"HuffmanTree(weight={self._root.weight}, leaves={leaf_count(self._root)})"

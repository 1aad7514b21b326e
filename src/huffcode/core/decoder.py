from __future__ import annotations

from collections.abc import Hashable

from huffcode.core.tree import Leaf, Node
from huffcode.errors import MalformedInput, TruncatedInput


def _decode_single(leaf: Leaf, bits: str) -> list[Hashable]:
    # Albero di una sola foglia: ogni '0' e' un simbolo.
    out: list[Hashable] = []
    for pos, ch in enumerate(bits):
        if ch == "0":
            out.append(leaf.symbol)
        elif ch == "1":
            raise MalformedInput(pos, ch, "no code starts with '1' in a single-symbol tree")
        else:
            raise MalformedInput(pos, ch)
    return out


def decode(root: Node, bits: str) -> list[Hashable]:
    """Walk the tree bit by bit and return the decoded symbols.

    Raises ``MalformedInput`` on a character other than '0'/'1' and
    ``TruncatedInput`` if the bits end before a leaf is reached.
    """
    if isinstance(root, Leaf):
        return _decode_single(root, bits)

    out: list[Hashable] = []
    node: Node = root
    start = 0
    for pos, ch in enumerate(bits):
        if ch == "0":
            node = node.left  # type: ignore[union-attr]
        elif ch == "1":
            node = node.right  # type: ignore[union-attr]
        else:
            raise MalformedInput(pos, ch)
        if isinstance(node, Leaf):
            out.append(node.symbol)
            node = root
            start = pos + 1

    if node is not root:
        raise TruncatedInput(start, len(bits) - start)
    return out


def decode_text(root: Node, bits: str) -> str:
    return "".join(str(sym) for sym in decode(root, bits))

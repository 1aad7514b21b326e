from __future__ import annotations

import math
from collections.abc import Hashable, Mapping

from huffcode.core.tree import Leaf, Node

# Convenzione per l'albero con un solo simbolo: codice di un bit.
SINGLE_SYMBOL_CODE = "0"

CodeTable = dict[Hashable, str]


def build_code_table(root: Node) -> CodeTable:
    """Symbol -> bit-string from root-to-leaf paths ('0' = left, '1' = right).

    Pre-order, iterative. A lone leaf gets ``SINGLE_SYMBOL_CODE`` instead of
    the empty path, so every symbol costs at least one bit.
    """
    if isinstance(root, Leaf):
        return {root.symbol: SINGLE_SYMBOL_CODE}

    codes: CodeTable = {}
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = path
            continue
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))
    return codes


def is_prefix_free(codes: Mapping[Hashable, str]) -> bool:
    # dopo l'ordinamento un prefisso precede sempre le sue estensioni
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True


def weighted_length(codes: Mapping[Hashable, str], freq: Mapping[Hashable, int]) -> int:
    """Total encoded bits: sum of frequency * code length."""
    return sum(f * len(codes[sym]) for sym, f in freq.items())


def fixed_width_bits(alphabet_size: int) -> int:
    """Bits per symbol of a fixed-width code (at least 1)."""
    if alphabet_size <= 1:
        return 1
    return math.ceil(math.log2(alphabet_size))

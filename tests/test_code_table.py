from __future__ import annotations

import pytest

from huffcode.core.builder import build_huffman_tree
from huffcode.core.codetable import (
    SINGLE_SYMBOL_CODE,
    build_code_table,
    fixed_width_bits,
    is_prefix_free,
    weighted_length,
)
from huffcode.core.forest import build_forest, collect_frequencies

CLRS = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}


def _codes(freq, **kwargs):
    return build_code_table(build_huffman_tree(build_forest(freq), **kwargs))


def test_clrs_code_table_is_pinned() -> None:
    # NOTE: pins the fifo tie-break; a different rule must not silently change it.
    assert _codes(CLRS) == {
        "a": "1100",
        "b": "1101",
        "c": "100",
        "d": "101",
        "e": "111",
        "f": "0",
    }


def test_clrs_shortest_and_longest() -> None:
    codes = _codes(CLRS)
    lengths = {sym: len(c) for sym, c in codes.items()}
    assert lengths["f"] == min(lengths.values())
    assert lengths["a"] == max(lengths.values())
    assert weighted_length(codes, CLRS) == 224


@pytest.mark.parametrize(
    "text",
    [
        "hello, wired world",
        "abracadabra",
        "aaaaaaaaaaaaaaaab",
        "the quick brown fox jumps over the lazy dog",
        "".join(chr(0x3B1 + i) * (i + 1) for i in range(20)),
    ],
)
def test_prefix_free_and_better_than_fixed_width(text: str) -> None:
    freq = collect_frequencies(text)
    for tie_break in ("fifo", "lifo"):
        codes = _codes(freq, tie_break=tie_break)
        assert set(codes) == set(freq)
        assert is_prefix_free(codes)
        assert weighted_length(codes, freq) <= fixed_width_bits(len(freq)) * len(text)


def test_single_symbol_gets_one_bit_code() -> None:
    assert _codes({"x": 7}) == {"x": SINGLE_SYMBOL_CODE}
    assert SINGLE_SYMBOL_CODE == "0"


def test_is_prefix_free_detects_prefix() -> None:
    assert is_prefix_free({"a": "0", "b": "10", "c": "11"})
    assert not is_prefix_free({"a": "1", "b": "10", "c": "0"})
    assert not is_prefix_free({"a": "01", "b": "01"})


def test_fixed_width_bits() -> None:
    assert fixed_width_bits(1) == 1
    assert fixed_width_bits(2) == 1
    assert fixed_width_bits(3) == 2
    assert fixed_width_bits(6) == 3
    assert fixed_width_bits(256) == 8
    assert fixed_width_bits(257) == 9


def test_deep_tree_does_not_recurse() -> None:
    # albero lineare con 2000 foglie: oltre il limite di ricorsione di default
    n = 2000
    freq = {chr(0x100 + i): 2**i for i in range(n)}
    codes = _codes(freq)
    assert len(codes) == n
    assert max(len(c) for c in codes.values()) == n - 1
    assert is_prefix_free(codes)

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping

from huffcode.core.builder import (
    STRATEGY_HEAP,
    TIE_BREAK_FIFO,
    MergeObserver,
    build_huffman_tree,
)
from huffcode.core.codec_base import SymbolCodec
from huffcode.core.codetable import CodeTable, build_code_table
from huffcode.core.decoder import decode
from huffcode.core.encoder import encode
from huffcode.core.forest import build_forest, collect_frequencies
from huffcode.core.tree import HuffmanTree
from huffcode.errors import TreeReleased


class HuffmanCodec(SymbolCodec):
    """Huffman code built from a frequency mapping.

    Owns its tree: use it as a context manager, or call ``close()``.
    """

    codec_id = "huffman"

    def __init__(
        self,
        freq: Mapping[Hashable, int],
        *,
        tie_break: str = TIE_BREAK_FIFO,
        strategy: str = STRATEGY_HEAP,
        on_merge: MergeObserver | None = None,
    ) -> None:
        forest = build_forest(freq)
        self._freq: dict[Hashable, int] = {leaf.symbol: leaf.weight for leaf in forest}
        self._tree = HuffmanTree(
            build_huffman_tree(forest, tie_break=tie_break, strategy=strategy, on_merge=on_merge)
        )
        self._codes: CodeTable | None = build_code_table(self._tree.root)

    @classmethod
    def from_frequencies(cls, freq: Mapping[Hashable, int], **kwargs) -> HuffmanCodec:
        return cls(freq, **kwargs)

    @classmethod
    def from_text(cls, text: Iterable[Hashable], **kwargs) -> HuffmanCodec:
        return cls(collect_frequencies(text), **kwargs)

    def _open_codes(self) -> CodeTable:
        # tabella e albero vengono rilasciati insieme da close()
        if self._codes is None:
            raise TreeReleased("huffman codec already closed")
        return self._codes

    @property
    def frequencies(self) -> dict[Hashable, int]:
        self._open_codes()
        return dict(self._freq)

    @property
    def tree(self) -> HuffmanTree:
        return self._tree

    @property
    def codes(self) -> CodeTable:
        return dict(self._open_codes())

    def encode(self, symbols: Iterable[Hashable]) -> str:
        return encode(self._open_codes(), symbols)

    def decode(self, bits: str) -> list[Hashable]:
        return decode(self._tree.root, bits)

    def close(self) -> None:
        self._codes = None
        self._tree.close()

    def __enter__(self) -> HuffmanCodec:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def huffman_encode_text(text: str, **kwargs) -> tuple[dict[Hashable, int], str]:
    """text -> (freq, bits). Riusabile da CLI e test."""
    with HuffmanCodec.from_text(text, **kwargs) as codec:
        return codec.frequencies, codec.encode(text)


def huffman_decode_text(freq: Mapping[Hashable, int], bits: str, **kwargs) -> str:
    """(freq, bits) -> text. Same options as the encoder, or the tree differs."""
    with HuffmanCodec.from_frequencies(freq, **kwargs) as codec:
        return codec.decode_text(bits)

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable


class SymbolCodec(ABC):
    """
    Minimal interface for symbol codecs.

    NOTE: output is a '0'/'1' string, no bit packing and no framing.
    """

    codec_id: str

    @abstractmethod
    def encode(self, symbols: Iterable[Hashable]) -> str:
        raise NotImplementedError

    @abstractmethod
    def decode(self, bits: str) -> list[Hashable]:
        raise NotImplementedError

    def decode_text(self, bits: str) -> str:
        return "".join(str(sym) for sym in self.decode(bits))

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping

from huffcode.errors import UnknownSymbol


def encode(codes: Mapping[Hashable, str], symbols: Iterable[Hashable]) -> str:
    """Concatenate the code of each symbol, in input order.

    Raises ``UnknownSymbol`` on the first symbol missing from ``codes``;
    nothing is returned in that case.
    """
    parts: list[str] = []
    for pos, sym in enumerate(symbols):
        try:
            parts.append(codes[sym])
        except KeyError:
            raise UnknownSymbol(sym, pos) from None
    return "".join(parts)

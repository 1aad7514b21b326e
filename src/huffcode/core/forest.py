from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping

from huffcode.core.tree import Leaf
from huffcode.errors import InvalidFrequency


def collect_frequencies(symbols: Iterable[Hashable]) -> dict[Hashable, int]:
    """Istogramma simbolo -> occorrenze (una stringa e' una sequenza di caratteri)."""
    return dict(Counter(symbols))


def _check_weight(symbol: Hashable, weight: object) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidFrequency(f"frequency for {symbol!r} must be an int, got {type(weight).__name__}")
    if weight <= 0:
        raise InvalidFrequency(f"frequency for {symbol!r} must be > 0, got {weight}")
    return weight


def build_forest(freq: Mapping[Hashable, int]) -> list[Leaf]:
    """One leaf per symbol, ordered by symbol.

    The ordering fixes the insertion sequence used by the tie-break rule, so
    the same mapping always yields the same tree. An empty mapping yields an
    empty forest; the constructor rejects it.
    """
    try:
        items = sorted(freq.items(), key=lambda kv: kv[0])
    except TypeError as e:
        raise InvalidFrequency(f"symbols must be mutually comparable: {e}") from e
    return [Leaf(symbol=sym, weight=_check_weight(sym, w)) for sym, w in items]

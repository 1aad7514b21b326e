"""Code report: how good is a Huffman code for its own frequency table.

Determinism note:
the serialized report MUST be deterministic given the same frequencies and
build options. No timestamps, no paths.
"""

from __future__ import annotations

import json
import math
from collections.abc import Hashable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from huffcode.core.codetable import fixed_width_bits, weighted_length


@dataclass(frozen=True)
class SymbolRow:
    symbol: str
    weight: int
    code: str
    length: int


@dataclass(frozen=True)
class CodeReport:
    alphabet_size: int
    total_weight: int
    weighted_bits: int
    fixed_width_bits: int
    fixed_total_bits: int
    avg_bits_per_symbol: float
    entropy_bits: float
    ratio_vs_fixed: float
    min_code_len: int
    max_code_len: int
    symbols: list[SymbolRow]


def _entropy(freq: Mapping[Hashable, int], total: int) -> float:
    if total <= 0:
        return 0.0
    h = 0.0
    for f in freq.values():
        p = f / total
        h -= p * math.log2(p)
    return h


def build_code_report(freq: Mapping[Hashable, int], codes: Mapping[Hashable, str]) -> CodeReport:
    total = sum(freq.values())
    n = len(freq)
    bits = weighted_length(codes, freq)
    fw = fixed_width_bits(n)
    fixed_total = fw * total
    lengths = [len(c) for c in codes.values()] or [0]

    rows = [
        SymbolRow(symbol=str(sym), weight=int(freq[sym]), code=codes[sym], length=len(codes[sym]))
        for sym in freq
    ]
    rows.sort(key=lambda r: (r.length, r.symbol))

    return CodeReport(
        alphabet_size=n,
        total_weight=total,
        weighted_bits=bits,
        fixed_width_bits=fw,
        fixed_total_bits=fixed_total,
        avg_bits_per_symbol=round(bits / total, 6) if total else 0.0,
        entropy_bits=round(_entropy(freq, total), 6),
        ratio_vs_fixed=round(bits / fixed_total, 6) if fixed_total else 0.0,
        min_code_len=min(lengths),
        max_code_len=max(lengths),
        symbols=rows,
    )


def report_to_dict(report: CodeReport) -> dict[str, Any]:
    return asdict(report)


def render_report_json(report: CodeReport) -> str:
    return json.dumps(report_to_dict(report), sort_keys=True, ensure_ascii=False, indent=2) + "\n"


def render_code_table(codes: Mapping[Hashable, str], freq: Mapping[Hashable, int]) -> str:
    """Human table: one line per symbol, shortest codes first."""
    lines: list[str] = []
    for sym in sorted(codes, key=lambda s: (len(codes[s]), str(s))):
        lines.append(f"{sym!r}\t{freq.get(sym, 0)}\t{codes[sym]}")
    return "\n".join(lines) + "\n"

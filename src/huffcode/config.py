"""Build options resolution.

Precedence: CLI flag > frequency spec field > environment > default.

Env:
  HUFFCODE_TIE_BREAK=fifo|lifo   tie-break between equal weights
  HUFFCODE_STRATEGY=heap|scan    tree construction strategy
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from huffcode.core.builder import STRATEGIES, STRATEGY_HEAP, TIE_BREAK_FIFO, TIE_BREAKS
from huffcode.errors import UsageError

ENV_TIE_BREAK = "HUFFCODE_TIE_BREAK"
ENV_STRATEGY = "HUFFCODE_STRATEGY"


@dataclass(frozen=True)
class BuildOptions:
    tie_break: str = TIE_BREAK_FIFO
    strategy: str = STRATEGY_HEAP

    def as_kwargs(self) -> dict[str, Any]:
        return {"tie_break": self.tie_break, "strategy": self.strategy}


def _env_choice(env: Mapping[str, str], name: str, choices: tuple[str, ...]) -> str | None:
    v = env.get(name)
    if v is None or not v.strip():
        return None
    v = v.strip().lower()
    if v not in choices:
        raise UsageError(f"{name}={v!r} not valid (expected one of {', '.join(choices)})")
    return v


def resolve_build_options(
    *,
    cli_tie_break: str | None = None,
    cli_strategy: str | None = None,
    spec_tie_break: str | None = None,
    spec_strategy: str | None = None,
    env: Mapping[str, str] | None = None,
) -> BuildOptions:
    e = os.environ if env is None else env
    tie_break = (
        cli_tie_break
        or spec_tie_break
        or _env_choice(e, ENV_TIE_BREAK, TIE_BREAKS)
        or TIE_BREAK_FIFO
    )
    strategy = (
        cli_strategy
        or spec_strategy
        or _env_choice(e, ENV_STRATEGY, STRATEGIES)
        or STRATEGY_HEAP
    )
    return BuildOptions(tie_break=tie_break, strategy=strategy)

"""Typed errors for huffcode.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_EMPTY_INPUT = 11
EXIT_UNKNOWN_SYMBOL = 12
EXIT_MALFORMED_INPUT = 13
EXIT_TRUNCATED_INPUT = 14


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid frequency spec, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_EMPTY_INPUT, "EMPTY_INPUT", "No symbols to build a Huffman tree from"),
    ExitCodeInfo(EXIT_UNKNOWN_SYMBOL, "UNKNOWN_SYMBOL", "Input symbol has no entry in the code table"),
    ExitCodeInfo(EXIT_MALFORMED_INPUT, "MALFORMED_INPUT", "Bit-string contains a character other than '0'/'1'"),
    ExitCodeInfo(EXIT_TRUNCATED_INPUT, "TRUNCATED_INPUT", "Bit-string ends in the middle of a code"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE: do not edit manually.\n")
    lines.append("> Source of truth: `src/huffcode/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `HuffcodeError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffcodeError(Exception):
    """Base error for huffcode."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffcodeError):
    exit_code = EXIT_USAGE


class InvalidFrequency(UsageError):
    pass


class EmptyInput(HuffcodeError):
    exit_code = EXIT_EMPTY_INPUT


class UnknownSymbol(HuffcodeError):
    exit_code = EXIT_UNKNOWN_SYMBOL

    def __init__(self, symbol: Any, position: int) -> None:
        super().__init__(f"symbol {symbol!r} at position {position} is not in the code table")
        self.symbol = symbol
        self.position = position


class CorruptBits(HuffcodeError):
    """Base for bit-string decoding failures."""


class MalformedInput(CorruptBits):
    exit_code = EXIT_MALFORMED_INPUT

    def __init__(self, position: int, char: str, reason: str | None = None) -> None:
        msg = reason or "not a binary digit"
        super().__init__(f"bad bit {char!r} at position {position}: {msg}")
        self.position = position
        self.char = char


class TruncatedInput(CorruptBits):
    exit_code = EXIT_TRUNCATED_INPUT

    def __init__(self, position: int, consumed: int) -> None:
        super().__init__(
            f"bit-string ends inside a code (code started at {position}, {consumed} bit(s) read)"
        )
        self.position = position
        self.consumed = consumed


class TreeReleased(HuffcodeError):
    pass

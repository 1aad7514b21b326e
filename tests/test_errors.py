from __future__ import annotations

from pathlib import Path

from huffcode import errors


def test_exit_codes_unique_and_stable() -> None:
    codes = [e.code for e in errors.EXIT_CODES]
    assert len(codes) == len(set(codes))
    assert errors.exit_code_info(13).name == "MALFORMED_INPUT"  # type: ignore[union-attr]
    assert errors.exit_code_info(99) is None


def test_exception_exit_codes() -> None:
    assert errors.UsageError().exit_code == errors.EXIT_USAGE
    assert errors.InvalidFrequency().exit_code == errors.EXIT_USAGE
    assert errors.EmptyInput().exit_code == errors.EXIT_EMPTY_INPUT
    assert errors.UnknownSymbol("q", 0).exit_code == errors.EXIT_UNKNOWN_SYMBOL
    assert errors.MalformedInput(0, "2").exit_code == errors.EXIT_MALFORMED_INPUT
    assert errors.TruncatedInput(0, 1).exit_code == errors.EXIT_TRUNCATED_INPUT
    assert isinstance(errors.TruncatedInput(0, 1), errors.CorruptBits)
    assert errors.TreeReleased().exit_code == errors.EXIT_GENERIC


def test_exit_codes_doc_in_sync() -> None:
    doc = Path(__file__).resolve().parents[1] / "docs" / "exit_codes.md"
    assert doc.read_text(encoding="utf-8") == errors.render_exit_codes_markdown()

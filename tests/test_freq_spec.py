from __future__ import annotations

import json
from pathlib import Path

import pytest

from huffcode.config import ENV_STRATEGY, ENV_TIE_BREAK, BuildOptions, resolve_build_options
from huffcode.errors import UsageError
from huffcode.freq_spec import SPEC_ID_V1, FreqSpecError, dump_freq_spec, load_freq_spec


def test_freq_spec_inline_minimal() -> None:
    spec = load_freq_spec(json.dumps({"spec": SPEC_ID_V1, "weights": {"a": 5, "b": 9}}))
    assert spec.weights == {"a": 5, "b": 9}
    assert spec.tie_break is None
    assert spec.strategy is None


def test_freq_spec_options() -> None:
    obj = {"spec": SPEC_ID_V1, "weights": {"x": 1}, "tie_break": "LIFO", "strategy": "scan"}
    spec = load_freq_spec(json.dumps(obj))
    assert spec.tie_break == "lifo"
    assert spec.strategy == "scan"


@pytest.mark.parametrize(
    "obj",
    [
        {"spec": SPEC_ID_V1, "weights": {"a": 1}, "wat": 1},
        {"spec": "huffcode.freq.v0", "weights": {"a": 1}},
        {"spec": SPEC_ID_V1},
        {"spec": SPEC_ID_V1, "weights": {}},
        {"spec": SPEC_ID_V1, "weights": {"ab": 1}},
        {"spec": SPEC_ID_V1, "weights": {"a": 0}},
        {"spec": SPEC_ID_V1, "weights": {"a": "3"}},
        {"spec": SPEC_ID_V1, "weights": {"a": True}},
        {"spec": SPEC_ID_V1, "weights": {"a": 1}, "tie_break": "random"},
        [1, 2, 3],
    ],
)
def test_freq_spec_rejects(obj: object) -> None:
    with pytest.raises(FreqSpecError):
        load_freq_spec(json.dumps(obj))


def test_freq_spec_bad_json() -> None:
    with pytest.raises(FreqSpecError):
        load_freq_spec("{not json")
    with pytest.raises(FreqSpecError):
        load_freq_spec("   ")


def test_freq_spec_file_roundtrip(tmp_path: Path) -> None:
    p = tmp_path / "freq.json"
    p.write_text(dump_freq_spec({"b": 2, "a": 1, " ": 4}, tie_break="fifo"), encoding="utf-8")
    spec = load_freq_spec(f"@{p}")
    assert spec.weights == {"a": 1, "b": 2, " ": 4}
    assert spec.tie_break == "fifo"
    assert spec.strategy is None

    with pytest.raises(FreqSpecError):
        load_freq_spec(f"@{tmp_path / 'missing.json'}")


def test_dump_freq_spec_is_deterministic() -> None:
    a = dump_freq_spec({"b": 2, "a": 1})
    b = dump_freq_spec({"a": 1, "b": 2})
    assert a == b
    assert json.loads(a) == {"spec": SPEC_ID_V1, "weights": {"a": 1, "b": 2}}


def test_build_options_precedence() -> None:
    env = {ENV_TIE_BREAK: "lifo", ENV_STRATEGY: "scan"}
    assert resolve_build_options(env={}) == BuildOptions("fifo", "heap")
    assert resolve_build_options(env=env) == BuildOptions("lifo", "scan")
    assert resolve_build_options(spec_tie_break="fifo", env=env) == BuildOptions("fifo", "scan")
    assert resolve_build_options(
        cli_strategy="heap", spec_strategy="scan", env=env
    ) == BuildOptions("lifo", "heap")
    assert BuildOptions().as_kwargs() == {"tie_break": "fifo", "strategy": "heap"}


def test_build_options_bad_env() -> None:
    with pytest.raises(UsageError):
        resolve_build_options(env={ENV_STRATEGY: "bogus"})
    # ignorata se la CLI decide
    assert resolve_build_options(cli_strategy="scan", env={ENV_STRATEGY: "bogus"}).strategy == "scan"

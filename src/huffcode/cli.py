"""huffcode CLI.

This is the stable CLI entrypoint (console-script: ``huffcode``).

UX policy:
  - Results go to stdout (or the OUTPUT file), diagnostics to stderr with a
    ``[huffcode]`` prefix.
  - Errors map to the exit codes in ``huffcode.errors``; ``--debug`` re-raises.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Hashable
from pathlib import Path

from huffcode.config import BuildOptions, resolve_build_options
from huffcode.core.builder import STRATEGIES, TIE_BREAKS, MergeStep
from huffcode.core.codec_huffman import HuffmanCodec
from huffcode.core.codetable import fixed_width_bits
from huffcode.core.forest import collect_frequencies
from huffcode.core.tree import format_tree
from huffcode.errors import EXIT_GENERIC, EXIT_OK, HuffcodeError, UsageError
from huffcode.freq_spec import dump_freq_spec, load_freq_spec
from huffcode.report import build_code_report, render_code_table, render_report_json

DEMO_TEXT = "hello, wired world"


def _log(msg: str) -> None:
    print(f"[huffcode] {msg}", file=sys.stderr)


def _log_merge(step: MergeStep) -> None:
    _log(
        f"merge {step.left.weight}+{step.right.weight} -> {step.parent.weight} "
        f"(forest={step.forest_size}, total={step.forest_weight})"
    )


def _read_text(path: Path) -> str:
    # newline="": "\r\n" e "\r" sono simboli, non vanno tradotti
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise UsageError(f"cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise UsageError(f"{path} is not valid UTF-8 text: {e}") from e


def _write_text(path: Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(data)


def _resolve(ns: argparse.Namespace, text: str | None) -> tuple[dict[Hashable, int], BuildOptions]:
    """Frequencies from --freq (if given) or from the input text, plus build options."""
    spec = load_freq_spec(ns.freq) if getattr(ns, "freq", None) else None
    opts = resolve_build_options(
        cli_tie_break=ns.tie_break,
        cli_strategy=ns.strategy,
        spec_tie_break=spec.tie_break if spec else None,
        spec_strategy=spec.strategy if spec else None,
    )
    if spec is not None:
        return dict(spec.weights), opts
    if text is None:
        raise UsageError("need INPUT or --freq to build a code")
    return collect_frequencies(text), opts


def _open_codec(ns: argparse.Namespace, text: str | None) -> HuffmanCodec:
    freq, opts = _resolve(ns, text)
    on_merge = _log_merge if getattr(ns, "verbose", False) else None
    return HuffmanCodec.from_frequencies(freq, on_merge=on_merge, **opts.as_kwargs())


def _cmd_codes(ns: argparse.Namespace) -> int:
    text = _read_text(ns.input) if ns.input else None
    with _open_codec(ns, text) as codec:
        if ns.json:
            out = {str(k): v for k, v in sorted(codec.codes.items(), key=lambda kv: str(kv[0]))}
            print(json.dumps(out, sort_keys=True, ensure_ascii=False))
        else:
            sys.stdout.write(render_code_table(codec.codes, codec.frequencies))
    return EXIT_OK


def _cmd_tree(ns: argparse.Namespace) -> int:
    text = _read_text(ns.input) if ns.input else None
    with _open_codec(ns, text) as codec:
        print(format_tree(codec.tree.root))
    return EXIT_OK


def _cmd_report(ns: argparse.Namespace) -> int:
    text = _read_text(ns.input) if ns.input else None
    with _open_codec(ns, text) as codec:
        sys.stdout.write(render_report_json(build_code_report(codec.frequencies, codec.codes)))
    return EXIT_OK


def _cmd_encode(ns: argparse.Namespace) -> int:
    text = _read_text(ns.input)
    freq, opts = _resolve(ns, text)
    on_merge = _log_merge if ns.verbose else None
    with HuffmanCodec.from_frequencies(freq, on_merge=on_merge, **opts.as_kwargs()) as codec:
        bits = codec.encode(text)
    _write_text(ns.output, bits)
    if ns.save_freq is not None:
        _write_text(
            ns.save_freq,
            dump_freq_spec(freq, tie_break=opts.tie_break, strategy=opts.strategy),
        )
    fixed = fixed_width_bits(len(freq)) * len(text)
    _log(f"encode: symbols={len(text)} bits={len(bits)} fixed={fixed}")
    return EXIT_OK


def _cmd_decode(ns: argparse.Namespace) -> int:
    bits = _read_text(ns.input).rstrip("\r\n")
    with _open_codec(ns, None) as codec:
        text = codec.decode_text(bits)
    _write_text(ns.output, text)
    _log(f"decode: bits={len(bits)} symbols={len(text)}")
    return EXIT_OK


def _cmd_demo(ns: argparse.Namespace) -> int:
    text = ns.text if ns.text is not None else DEMO_TEXT
    with _open_codec(ns, text) as codec:
        print(format_tree(codec.tree.root))
        bits = codec.encode(text)
        print(f"code: {bits}")
        print(f"text: {codec.decode_text(bits)}")
    return EXIT_OK


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--tie-break", choices=TIE_BREAKS, default=None, help="Equal-weight order (default: fifo)")
    p.add_argument("--strategy", choices=STRATEGIES, default=None, help="Tree construction (default: heap)")
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _add_freq_arg(p: argparse.ArgumentParser, *, required: bool = False) -> None:
    p.add_argument(
        "--freq",
        default=None,
        required=required,
        help="Frequency spec JSON. Use '@file.json' to load from file, or pass JSON inline.",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huffcode", description="Huffman prefix codes for text")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_codes = sub.add_parser("codes", help="Print the code table")
    p_codes.add_argument("input", type=Path, nargs="?", default=None)
    _add_freq_arg(p_codes)
    p_codes.add_argument("--json", action="store_true", help="Print {symbol: code} as JSON")
    _add_common_args(p_codes)

    p_tree = sub.add_parser("tree", help="Print the Huffman tree")
    p_tree.add_argument("input", type=Path, nargs="?", default=None)
    _add_freq_arg(p_tree)
    p_tree.add_argument("--verbose", action="store_true", help="Log merge steps on stderr")
    _add_common_args(p_tree)

    p_enc = sub.add_parser("encode", help="Encode a text file to a '0'/'1' file")
    p_enc.add_argument("input", type=Path)
    p_enc.add_argument("output", type=Path)
    _add_freq_arg(p_enc)
    p_enc.add_argument(
        "--save-freq",
        type=Path,
        default=None,
        help="Write the frequency spec needed to decode OUTPUT",
    )
    p_enc.add_argument("--verbose", action="store_true", help="Log merge steps on stderr")
    _add_common_args(p_enc)

    p_dec = sub.add_parser("decode", help="Decode a '0'/'1' file back to text")
    p_dec.add_argument("input", type=Path)
    p_dec.add_argument("output", type=Path)
    _add_freq_arg(p_dec, required=True)
    _add_common_args(p_dec)

    p_rep = sub.add_parser("report", help="JSON report (bits vs fixed width, entropy)")
    p_rep.add_argument("input", type=Path, nargs="?", default=None)
    _add_freq_arg(p_rep)
    _add_common_args(p_rep)

    p_demo = sub.add_parser("demo", help="Build, print, encode and decode a sample string")
    p_demo.add_argument("text", nargs="?", default=None)
    _add_common_args(p_demo)

    return p


_COMMANDS = {
    "codes": _cmd_codes,
    "tree": _cmd_tree,
    "encode": _cmd_encode,
    "decode": _cmd_decode,
    "report": _cmd_report,
    "demo": _cmd_demo,
}


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        return _COMMANDS[ns.cmd](ns)
    except SystemExit:
        raise
    except HuffcodeError as e:
        if getattr(ns, "debug", False):
            raise
        _log(str(e))
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        _log(f"error: {e}")
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())

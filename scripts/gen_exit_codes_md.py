#!/usr/bin/env python3
"""Write docs/exit_codes.md from src/huffcode/errors.py (single source of truth).

Usage:
  python scripts/gen_exit_codes_md.py           regenerate
  python scripts/gen_exit_codes_md.py --check   exit 1 if the file is stale
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
DOC = REPO / "docs" / "exit_codes.md"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--check", action="store_true", help="Only compare, do not write")
    ns = ap.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from huffcode.errors import render_exit_codes_markdown  # noqa: E402

    want = render_exit_codes_markdown()
    if ns.check:
        have = DOC.read_text(encoding="utf-8") if DOC.is_file() else ""
        if have != want:
            print(f"[huffcode] {DOC} is stale, run scripts/gen_exit_codes_md.py", file=sys.stderr)
            return 1
        print("[huffcode] exit codes doc up to date")
        return 0

    DOC.parent.mkdir(parents=True, exist_ok=True)
    DOC.write_text(want, encoding="utf-8")
    print(f"[huffcode] wrote {DOC}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

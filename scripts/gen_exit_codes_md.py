#!/usr/bin/env python3
"""Write (or check) docs/exit_codes.md from src/static_huffman/errors.py.

  python scripts/gen_exit_codes_md.py           # regenerate
  python scripts/gen_exit_codes_md.py --check   # exit 1 if the doc is stale
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
DOC = REPO / "docs" / "exit_codes.md"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("--check", action="store_true", help="Only compare, do not write")
    ns = p.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from static_huffman.errors import render_exit_codes_markdown  # noqa: E402

    want = render_exit_codes_markdown()
    have = DOC.read_text(encoding="utf-8") if DOC.is_file() else None

    if ns.check:
        if have != want:
            print(f"[shuff] {DOC.relative_to(REPO)} is stale, run without --check", file=sys.stderr)
            return 1
        print(f"[shuff] {DOC.relative_to(REPO)} up to date")
        return 0

    if have == want:
        print(f"[shuff] {DOC.relative_to(REPO)} unchanged")
        return 0
    DOC.parent.mkdir(parents=True, exist_ok=True)
    DOC.write_text(want, encoding="utf-8")
    print(f"[shuff] wrote {DOC.relative_to(REPO)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

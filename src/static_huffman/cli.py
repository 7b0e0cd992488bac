"""static-huffman CLI.

Console-script: ``shuff``.

Layout policy: ``compress DIR NAME`` reads DIR/NAME and writes the three
artifacts under DIR/encoded/; ``decompress DIR NAME`` reads them back and
writes DIR/NAME.
"""

from __future__ import annotations

import argparse
import sys
import time
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from static_huffman.core.alphabet import alphabet_by_name
from static_huffman.core.codec_huffman import CodecHuffman
from static_huffman.engine.artifact_dir import load_artifact, store_artifact
from static_huffman.errors import EXIT_GENERIC, HuffmanError, MissingResource

PROG = "shuff"

_ALIASES = {"c": "compress", "d": "decompress"}


def _version() -> str:
    try:
        return version("static-huffman")
    except PackageNotFoundError:
        return "0+unknown"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


def _compress(work_dir: Path, name: str, symbols: str) -> int:
    t0 = time.perf_counter()
    src = work_dir / name
    if not src.is_file():
        raise MissingResource(f"input file not found: {src}")

    alphabet = alphabet_by_name(symbols)
    artifact = CodecHuffman().compress_bytes(src.read_bytes(), alphabet)
    store_artifact(artifact, work_dir)

    print("Compressed successfully!")
    print(f"Compressing file took: {_elapsed_ms(t0)} ms!")
    return 0


def _decompress(work_dir: Path, name: str) -> int:
    t0 = time.perf_counter()
    artifact = load_artifact(work_dir)
    data = CodecHuffman().decompress_bytes(artifact)
    (work_dir / name).write_bytes(data)

    print("Decompressed successfully!")
    print(f"Decompressing file took: {_elapsed_ms(t0)} ms!")
    return 0


def _verify(work_dir: Path, *, full: bool) -> int:
    from static_huffman.verify import verify_encoded_dir

    s = verify_encoded_dir(work_dir, full=full)
    detail = f"alphabet={s.alphabet} leaves={s.leaves} bits={s.n_bits}"
    if s.n_symbols is not None:
        detail += f" symbols={s.n_symbols}"
    print(f"OK {detail}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG, description="Static Huffman compressor")
    p.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", aliases=["c"], help="Compress DIR/NAME into DIR/encoded/")
    p_c.add_argument("work_dir", type=Path)
    p_c.add_argument("name", help="Input file name inside work_dir (with extension)")
    p_c.add_argument(
        "--symbols",
        choices=["text", "bytes"],
        default="text",
        help="Symbol alphabet: UTF-16 code units of the text (default) or raw bytes",
    )
    _add_common_args(p_c)

    p_d = sub.add_parser(
        "decompress", aliases=["d"], help="Decompress DIR/encoded/ into DIR/NAME"
    )
    p_d.add_argument("work_dir", type=Path)
    p_d.add_argument("name", help="Output file name inside work_dir (with extension)")
    _add_common_args(p_d)

    p_v = sub.add_parser("verify", help="Verify the artifacts in DIR/encoded/")
    p_v.add_argument("work_dir", type=Path)
    p_v.add_argument("--full", action="store_true", help="Decode the whole stream too")
    _add_common_args(p_v)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)
    cmd = _ALIASES.get(ns.cmd, ns.cmd)

    try:
        if cmd == "compress":
            return _compress(ns.work_dir, ns.name, ns.symbols)
        if cmd == "decompress":
            return _decompress(ns.work_dir, ns.name)
        if cmd == "verify":
            return _verify(ns.work_dir, full=bool(ns.full))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HuffmanError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[{PROG}] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[{PROG}] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())

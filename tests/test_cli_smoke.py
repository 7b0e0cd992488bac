from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from static_huffman.cli import main

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    """Run shuff through a python -c wrapper.

    This avoids assuming the console-script entrypoint is installed.
    """
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC_DIR), env.get("PYTHONPATH", "")) if p)
    cmd = [
        sys.executable,
        "-c",
        "from static_huffman.cli import main; raise SystemExit(main())",
        *args,
    ]
    return subprocess.run(cmd, text=True, capture_output=True, env=env)


@pytest.mark.p0
def test_cli_roundtrip_text_subprocess(tmp_path: Path) -> None:
    data = "abracadabra\nGrüße 😀\n"
    (tmp_path / "in.txt").write_text(data, encoding="utf-8")

    r = _run_cli("compress", str(tmp_path), "in.txt")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert "Compressed successfully!" in r.stdout
    assert "Compressing file took:" in r.stdout

    r = _run_cli("verify", str(tmp_path), "--full")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert r.stdout.startswith("OK")

    r = _run_cli("decompress", str(tmp_path), "out.txt")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert "Decompressed successfully!" in r.stdout
    assert (tmp_path / "out.txt").read_text(encoding="utf-8") == data


def test_cli_aliases_and_bytes_mode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    data = bytes(range(256)) * 3 + b"\xff\x00"
    (tmp_path / "blob.bin").write_bytes(data)

    assert main(["c", str(tmp_path), "blob.bin", "--symbols", "bytes"]) == 0
    assert (tmp_path / "encoded" / "data.huff").read_bytes()[4:8] == (256).to_bytes(4, "big")

    assert main(["d", str(tmp_path), "back.bin"]) == 0
    assert (tmp_path / "back.bin").read_bytes() == data

    out = capsys.readouterr().out
    assert "Compressed successfully!" in out
    assert "Decompressed successfully!" in out


def test_cli_text_mode_keeps_invalid_utf8(tmp_path: Path) -> None:
    data = b"caf\xe9 \x80\x81 plain"
    (tmp_path / "latin1.txt").write_bytes(data)
    assert main(["compress", str(tmp_path), "latin1.txt"]) == 0
    assert main(["decompress", str(tmp_path), "back.txt"]) == 0
    assert (tmp_path / "back.txt").read_bytes() == data


def test_cli_empty_file(tmp_path: Path) -> None:
    (tmp_path / "empty.txt").write_bytes(b"")
    assert main(["compress", str(tmp_path), "empty.txt"]) == 0
    assert (tmp_path / "encoded" / "data.pad").read_bytes() == b"\x00"
    assert main(["decompress", str(tmp_path), "back.txt"]) == 0
    assert (tmp_path / "back.txt").read_bytes() == b""


def test_cli_missing_input_exit_12(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["compress", str(tmp_path), "nope.txt"]) == 12
    assert "[shuff]" in capsys.readouterr().err


def test_cli_decompress_without_artifacts_exit_12(tmp_path: Path) -> None:
    assert main(["decompress", str(tmp_path), "out.txt"]) == 12


def test_cli_corrupt_tree_exit_10(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "in.txt").write_text("hello", encoding="utf-8")
    assert main(["compress", str(tmp_path), "in.txt"]) == 0
    (tmp_path / "encoded" / "data.huff").write_bytes(b"HFT1\x00\x01\x00\x00\x07")

    assert main(["verify", str(tmp_path)]) == 10
    assert main(["decompress", str(tmp_path), "out.txt"]) == 10
    assert "unknown node tag" in capsys.readouterr().err


def test_cli_unsupported_version_exit_11(tmp_path: Path) -> None:
    (tmp_path / "in.txt").write_text("hello", encoding="utf-8")
    assert main(["compress", str(tmp_path), "in.txt"]) == 0
    tree = tmp_path / "encoded" / "data.huff"
    tree.write_bytes(b"HFT9" + tree.read_bytes()[4:])
    assert main(["decompress", str(tmp_path), "out.txt"]) == 11


def test_cli_debug_reraises(tmp_path: Path) -> None:
    from static_huffman.errors import MissingResource

    with pytest.raises(MissingResource):
        main(["decompress", str(tmp_path), "out.txt", "--debug"])


def test_cli_usage_errors_exit_2() -> None:
    with pytest.raises(SystemExit) as ei:
        main(["compress"])
    assert ei.value.code == 2
    with pytest.raises(SystemExit) as ei:
        main(["compress", ".", "x", "--symbols", "ebcdic"])
    assert ei.value.code == 2


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ei:
        main(["--version"])
    assert ei.value.code == 0
    assert capsys.readouterr().out.startswith("shuff ")

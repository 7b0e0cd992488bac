from __future__ import annotations

from pathlib import Path

import pytest

from static_huffman.core.alphabet import BYTES, UTF16_UNITS
from static_huffman.core.codec_huffman import decode, encode
from static_huffman.core.symbols import text_to_units
from static_huffman.engine.artifact_dir import ArtifactPaths, load_artifact, store_artifact
from static_huffman.errors import CorruptPayload, MissingResource


def test_store_writes_three_files(tmp_path: Path) -> None:
    paths = store_artifact(encode("abracadabra"), tmp_path)
    assert paths == ArtifactPaths(tmp_path / "encoded")
    assert paths.tree.name == "data.huff"
    assert paths.pad.read_bytes() == b"\x01"
    assert paths.data.read_bytes() == b"\x6e\x8a\xdc"
    assert paths.tree.read_bytes()[:4] == b"HFT1"


def test_store_then_load_roundtrip(tmp_path: Path) -> None:
    art = encode("abracadabra")
    store_artifact(art, tmp_path)
    back = load_artifact(tmp_path)
    assert back.bits == art.bits
    assert back.tree == art.tree
    assert back.alphabet == UTF16_UNITS
    assert decode(back) == text_to_units("abracadabra")


def test_store_reuses_existing_encoded_dir(tmp_path: Path) -> None:
    (tmp_path / "encoded").mkdir()
    store_artifact(encode("aaaa"), tmp_path)
    store_artifact(encode(list(b"xyz"), BYTES), tmp_path)
    back = load_artifact(tmp_path)
    assert back.alphabet == BYTES
    assert decode(back) == list(b"xyz")


def test_empty_input_artifacts(tmp_path: Path) -> None:
    paths = store_artifact(encode(""), tmp_path)
    assert paths.data.read_bytes() == b""
    assert paths.pad.read_bytes() == b"\x00"
    back = load_artifact(tmp_path)
    assert back.tree is None
    assert decode(back) == []


@pytest.mark.parametrize("missing", ["data.huff", "data.pad", "data.bin"])
def test_load_missing_file(tmp_path: Path, missing: str) -> None:
    store_artifact(encode("abc"), tmp_path)
    (tmp_path / "encoded" / missing).unlink()
    with pytest.raises(MissingResource, match=missing):
        load_artifact(tmp_path)


@pytest.mark.parametrize(
    "pad_bytes,match",
    [(b"", "expected 1 byte"), (b"\x01\x02", "expected 1 byte"), (b"\x09", "out of range")],
)
def test_load_bad_pad_file(tmp_path: Path, pad_bytes: bytes, match: str) -> None:
    paths = store_artifact(encode("abc"), tmp_path)
    paths.pad.write_bytes(pad_bytes)
    with pytest.raises(CorruptPayload, match=match):
        load_artifact(tmp_path)


def test_load_pad_with_empty_data(tmp_path: Path) -> None:
    paths = store_artifact(encode(""), tmp_path)
    paths.pad.write_bytes(b"\x03")
    with pytest.raises(CorruptPayload, match="empty"):
        load_artifact(tmp_path)

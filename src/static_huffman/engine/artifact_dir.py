"""On-disk layout of a compressed unit: three co-located files.

  <dir>/encoded/data.huff   tree artifact (see tree_format)
  <dir>/encoded/data.pad    one byte, pad count 0..7
  <dir>/encoded/data.bin    packed bits (MSB first)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from static_huffman.core.codec_huffman import EncodedArtifact
from static_huffman.engine.tree_format import pack_tree, unpack_tree
from static_huffman.errors import CorruptPayload, MissingResource

ENCODED_DIRNAME = "encoded"
TREE_NAME = "data.huff"
PAD_NAME = "data.pad"
DATA_NAME = "data.bin"


@dataclass(frozen=True)
class ArtifactPaths:
    root: Path

    @classmethod
    def for_dir(cls, work_dir: Path) -> "ArtifactPaths":
        return cls(root=Path(work_dir) / ENCODED_DIRNAME)

    @property
    def tree(self) -> Path:
        return self.root / TREE_NAME

    @property
    def pad(self) -> Path:
        return self.root / PAD_NAME

    @property
    def data(self) -> Path:
        return self.root / DATA_NAME


@dataclass(frozen=True)
class RawArtifact:
    """The three files as bytes, before decoding."""

    tree_blob: bytes
    pad: int
    packed: bytes


def store_artifact(artifact: EncodedArtifact, work_dir: Path) -> ArtifactPaths:
    paths = ArtifactPaths.for_dir(work_dir)
    paths.root.mkdir(parents=True, exist_ok=True)

    packed, pad = artifact.packed()
    paths.tree.write_bytes(pack_tree(artifact.tree, artifact.alphabet))
    paths.data.write_bytes(packed)
    paths.pad.write_bytes(bytes([pad]))
    return paths


def _read(p: Path) -> bytes:
    if not p.is_file():
        raise MissingResource(f"missing artifact file: {p}")
    return p.read_bytes()


def read_raw_artifact(work_dir: Path) -> RawArtifact:
    paths = ArtifactPaths.for_dir(work_dir)
    tree_blob = _read(paths.tree)
    pad_raw = _read(paths.pad)
    packed = _read(paths.data)

    if len(pad_raw) != 1:
        raise CorruptPayload(f"{PAD_NAME}: expected 1 byte, found {len(pad_raw)}")
    pad = pad_raw[0]
    if pad > 7:
        raise CorruptPayload(f"{PAD_NAME}: pad out of range (0..7): {pad}")
    if pad and not packed:
        raise CorruptPayload(f"{PAD_NAME}: pad {pad} with empty {DATA_NAME}")
    return RawArtifact(tree_blob=tree_blob, pad=pad, packed=packed)


def load_artifact(work_dir: Path) -> EncodedArtifact:
    raw = read_raw_artifact(work_dir)
    root, alphabet = unpack_tree(raw.tree_blob)
    return EncodedArtifact.from_packed(root, raw.packed, raw.pad, alphabet)

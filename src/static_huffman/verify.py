"""Verification of an encoded directory.

Light by default (files present, pad sane, tree parses); ``full=True`` also
decodes the whole stream and checks that the padding bits are zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from static_huffman.core.bitpack import unpack_bits
from static_huffman.core.codec_huffman import decode_bits
from static_huffman.core.node import iter_leaves
from static_huffman.engine.artifact_dir import read_raw_artifact
from static_huffman.engine.tree_format import unpack_tree
from static_huffman.errors import CorruptPayload


@dataclass(frozen=True)
class VerifySummary:
    alphabet: str
    leaves: int
    n_bits: int
    n_symbols: int | None  # only known after a full decode


def verify_encoded_dir(work_dir: Path, *, full: bool = False) -> VerifySummary:
    raw = read_raw_artifact(work_dir)
    root, alphabet = unpack_tree(raw.tree_blob)
    n_bits = len(raw.packed) * 8 - raw.pad
    leaves = sum(1 for _ in iter_leaves(root))

    if root is None and raw.packed:
        raise CorruptPayload(f"{len(raw.packed)} data byte(s) with an empty tree")

    if not full:
        return VerifySummary(alphabet=alphabet.name, leaves=leaves, n_bits=n_bits, n_symbols=None)

    bits = unpack_bits(raw.packed)
    if raw.pad and bits[len(bits) - raw.pad :] != "0" * raw.pad:
        raise CorruptPayload("padding bits are not zero")
    symbols = decode_bits(root, bits[:n_bits])
    return VerifySummary(
        alphabet=alphabet.name, leaves=leaves, n_bits=n_bits, n_symbols=len(symbols)
    )

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from static_huffman.core.alphabet import UTF16_UNITS, Alphabet
from static_huffman.core.bitpack import pack_bits, padding_for, unpack_stripped
from static_huffman.core.codec_base import Codec
from static_huffman.core.codes import build_code_table
from static_huffman.core.freq import count_symbols
from static_huffman.core.node import Leaf, Node, is_leaf
from static_huffman.core.symbols import bytes_to_symbols, symbols_to_bytes, text_to_units
from static_huffman.core.tree import build_huffman_tree
from static_huffman.errors import CorruptPayload, InvalidBit, TruncatedStream


@dataclass(frozen=True)
class EncodedArtifact:
    """Result of a compression: the logical bit sequence plus the tree that decodes it."""

    bits: str
    tree: Optional[Node]
    alphabet: Alphabet = UTF16_UNITS

    @property
    def pad(self) -> int:
        return padding_for(len(self.bits))

    def packed(self) -> Tuple[bytes, int]:
        return pack_bits(self.bits)

    @classmethod
    def from_packed(
        cls, tree: Optional[Node], packed: bytes, pad: int, alphabet: Alphabet = UTF16_UNITS
    ) -> "EncodedArtifact":
        return cls(bits=unpack_stripped(packed, pad), tree=tree, alphabet=alphabet)


def encode_symbols(data: Sequence[int], codes: Dict[int, str]) -> str:
    return "".join([codes[sym] for sym in data])


def encode(
    data: Union[str, Sequence[int]], alphabet: Alphabet = UTF16_UNITS
) -> EncodedArtifact:
    """
    Reusable core: data -> (bits, tree)

    ``data`` is a sequence of symbols in 0..alphabet.size-1; a ``str`` is taken
    as its UTF-16 code units.
    """
    symbols = text_to_units(data) if isinstance(data, str) else data
    freq = count_symbols(symbols, alphabet)
    root = build_huffman_tree(freq)
    if root is None:
        return EncodedArtifact(bits="", tree=None, alphabet=alphabet)
    codes = build_code_table(root)
    return EncodedArtifact(bits=encode_symbols(symbols, codes), tree=root, alphabet=alphabet)


def decode_bits(root: Optional[Node], bits: str) -> List[int]:
    """
    Walk the tree bit by bit; every leaf reached emits its symbol and
    restarts from the root. ``bits`` must already be stripped of padding.
    """
    if not bits:
        return []
    if root is None:
        raise CorruptPayload(f"{len(bits)} encoded bits but the tree is empty")
    if is_leaf(root):
        raise CorruptPayload("tree root is a leaf")

    out: List[int] = []
    node: Node = root
    for i, bit in enumerate(bits):
        # node is always Internal here: leaves reset to root below
        if bit == "0":
            node = node.left  # type: ignore[union-attr]
        elif bit == "1":
            node = node.right  # type: ignore[union-attr]
        else:
            raise InvalidBit(bit, i)

        if isinstance(node, Leaf):
            if node.symbol is None:
                raise CorruptPayload(f"placeholder leaf reached at bit {i}")
            out.append(node.symbol)
            node = root

    if node is not root:
        raise TruncatedStream(
            f"encoded stream ends mid-code after {len(out)} symbols ({len(bits)} bits)"
        )
    return out


def decode(artifact: EncodedArtifact) -> List[int]:
    return decode_bits(artifact.tree, artifact.bits)


def code_lengths(root: Optional[Node]) -> Dict[int, int]:
    return {sym: len(code) for sym, code in build_code_table(root).items()}


class CodecHuffman(Codec):
    codec_id = "huffman"

    def compress_symbols(
        self, symbols: Sequence[int], alphabet: Alphabet = UTF16_UNITS
    ) -> EncodedArtifact:
        return encode(list(symbols), alphabet)

    def decompress_symbols(self, artifact: EncodedArtifact) -> List[int]:
        return decode(artifact)

    def compress_bytes(self, data: bytes, alphabet: Alphabet = UTF16_UNITS) -> EncodedArtifact:
        return encode(bytes_to_symbols(data, alphabet), alphabet)

    def decompress_bytes(self, artifact: EncodedArtifact) -> bytes:
        return symbols_to_bytes(decode(artifact), artifact.alphabet)

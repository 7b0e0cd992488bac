"""Tree artifact (data.huff) wire format.

Layout:
  "HFT1" + u32be(alphabet_size) + pre-order node records

  0x00                         internal node (left subtree, then right subtree)
  0x01 + symbol (width bytes)  leaf, symbol big-endian, width from alphabet_size
  0x02                         placeholder leaf

An empty tree is the header alone. Weights are not stored.
Both directions use an explicit stack: skewed trees can be deep.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from static_huffman.core.alphabet import Alphabet, alphabet_for_size
from static_huffman.core.node import Internal, Leaf, Node
from static_huffman.errors import BadMagic, MalformedTree, UnsupportedVersion

MAGIC = b"HFT"
VERSION = b"1"
HEADER_LEN = len(MAGIC) + len(VERSION) + 4

TAG_INTERNAL = 0x00
TAG_LEAF = 0x01
TAG_PLACEHOLDER = 0x02


def pack_tree(root: Optional[Node], alphabet: Alphabet) -> bytes:
    width = alphabet.symbol_width
    out = bytearray()
    out += MAGIC + VERSION
    out += alphabet.size.to_bytes(4, "big")
    if root is None:
        return bytes(out)

    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Internal):
            out.append(TAG_INTERNAL)
            stack.append(node.right)
            stack.append(node.left)
        elif node.symbol is None:
            out.append(TAG_PLACEHOLDER)
        else:
            if node.symbol not in alphabet:
                raise ValueError(f"leaf symbol {node.symbol} outside alphabet {alphabet.name}")
            out.append(TAG_LEAF)
            out += node.symbol.to_bytes(width, "big")
    return bytes(out)


def _read_header(blob: bytes) -> Alphabet:
    if len(blob) < len(MAGIC) or blob[: len(MAGIC)] != MAGIC:
        raise BadMagic("data.huff: bad magic (not a tree artifact)")
    if len(blob) < HEADER_LEN:
        raise MalformedTree("data.huff: header truncated")
    ver = blob[len(MAGIC) : len(MAGIC) + 1]
    if ver != VERSION:
        raise UnsupportedVersion(f"data.huff: unsupported version {ver!r}")
    size = int.from_bytes(blob[len(MAGIC) + 1 : HEADER_LEN], "big")
    if size == 0:
        raise MalformedTree("data.huff: alphabet size 0")
    return alphabet_for_size(size)


def _read_records(blob: bytes, alphabet: Alphabet) -> List[Tuple[int, Optional[int]]]:
    width = alphabet.symbol_width
    records: List[Tuple[int, Optional[int]]] = []
    idx = HEADER_LEN
    pending = 1  # subtrees still to read
    placeholders = 0
    seen: set[int] = set()

    while pending:
        if idx >= len(blob):
            raise MalformedTree(f"data.huff: truncated, {pending} subtree(s) missing")
        tag = blob[idx]
        idx += 1
        pending -= 1
        if tag == TAG_INTERNAL:
            pending += 2
            records.append((tag, None))
        elif tag == TAG_LEAF:
            if idx + width > len(blob):
                raise MalformedTree("data.huff: truncated leaf symbol")
            sym = int.from_bytes(blob[idx : idx + width], "big")
            idx += width
            if sym >= alphabet.size:
                raise MalformedTree(f"data.huff: symbol {sym} outside alphabet size {alphabet.size}")
            if sym in seen:
                raise MalformedTree(f"data.huff: symbol {sym} appears twice")
            seen.add(sym)
            records.append((tag, sym))
        elif tag == TAG_PLACEHOLDER:
            placeholders += 1
            if placeholders > 1:
                raise MalformedTree("data.huff: more than one placeholder leaf")
            records.append((tag, None))
        else:
            raise MalformedTree(f"data.huff: unknown node tag 0x{tag:02x} at offset {idx - 1}")

    if idx != len(blob):
        raise MalformedTree(f"data.huff: {len(blob) - idx} trailing byte(s)")
    if records[0][0] != TAG_INTERNAL:
        raise MalformedTree("data.huff: root is a leaf")
    return records


def unpack_tree(blob: bytes) -> Tuple[Optional[Node], Alphabet]:
    """data.huff bytes -> (root, alphabet). Rebuilt nodes carry weight 0."""
    alphabet = _read_header(blob)
    if len(blob) == HEADER_LEN:
        return None, alphabet

    records = _read_records(blob, alphabet)

    # reversed pre-order: children are on the stack when their parent shows up
    stack: List[Node] = []
    for tag, sym in reversed(records):
        if tag == TAG_INTERNAL:
            left = stack.pop()
            right = stack.pop()
            stack.append(Internal(left=left, right=right))
        else:
            stack.append(Leaf(symbol=sym))
    return stack[0], alphabet

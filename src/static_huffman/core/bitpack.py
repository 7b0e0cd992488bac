"""Bit packing: logical '0'/'1' strings <-> bytes (MSB first).

The last byte is filled with zero bits; the number of filler bits (0..7)
is the *pad* that must travel with the bytes to recover the exact length.
"""

from __future__ import annotations

from typing import Tuple

_BIT_CHARS = frozenset("01")


def padding_for(n_bits: int) -> int:
    return (8 - n_bits % 8) % 8


def pack_bits(bits: str) -> Tuple[bytes, int]:
    """bits -> (packed, pad)"""
    if not bits:
        return b"", 0
    bad = set(bits) - _BIT_CHARS
    if bad:
        raise ValueError(f"bit string contains non-binary characters: {sorted(bad)!r}")

    pad = padding_for(len(bits))
    padded = bits + "0" * pad
    n_bytes = len(padded) // 8
    return int(padded, 2).to_bytes(n_bytes, "big"), pad


def unpack_bits(data: bytes) -> str:
    """bytes -> bit string of length 8 * len(data), padding included."""
    return "".join(format(b, "08b") for b in data)


def strip_padding(bits: str, pad: int) -> str:
    if pad < 0 or pad > 7:
        raise ValueError(f"pad out of range (0..7): {pad}")
    if pad > len(bits):
        raise ValueError(f"pad {pad} longer than bit string ({len(bits)} bits)")
    return bits[: len(bits) - pad]


def unpack_stripped(data: bytes, pad: int) -> str:
    return strip_padding(unpack_bits(data), pad)

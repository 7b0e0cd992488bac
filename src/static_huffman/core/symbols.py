"""Conversions between raw file bytes and symbol sequences.

Text mode works on UTF-16 code units. Bytes that are not valid UTF-8 are
carried through with ``surrogateescape`` so that any file round-trips.
"""

from __future__ import annotations

from collections.abc import Sequence

from static_huffman.core.alphabet import BYTES, UTF16_UNITS, Alphabet


def text_to_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def units_to_text(units: Sequence[int]) -> str:
    raw = bytearray()
    for u in units:
        raw += int(u).to_bytes(2, "little")
    return raw.decode("utf-16-le", "surrogatepass")


def bytes_to_symbols(data: bytes, alphabet: Alphabet) -> list[int]:
    if alphabet == BYTES:
        return list(data)
    if alphabet == UTF16_UNITS:
        return text_to_units(data.decode("utf-8", "surrogateescape"))
    raise ValueError(f"no byte conversion for alphabet {alphabet.name!r}")


def symbols_to_bytes(symbols: Sequence[int], alphabet: Alphabet) -> bytes:
    if alphabet == BYTES:
        return bytes(symbols)
    if alphabet == UTF16_UNITS:
        return units_to_text(symbols).encode("utf-8", "surrogateescape")
    raise ValueError(f"no byte conversion for alphabet {alphabet.name!r}")

"""Symbol alphabets.

The alphabet is an explicit contract: every counter/tree call receives one,
and its size travels inside the tree artifact so the decoder knows how to
turn symbols back into bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

# alphabet size is stored as a u32 in the tree artifact
MAX_ALPHABET_SIZE = (1 << 32) - 1


@dataclass(frozen=True, slots=True)
class Alphabet:
    name: str
    size: int  # symbols are 0..size-1

    def __post_init__(self) -> None:
        if self.size <= 0 or self.size > MAX_ALPHABET_SIZE:
            raise ValueError(f"alphabet size out of range: {self.size}")

    @property
    def symbol_width(self) -> int:
        """Bytes needed to store one symbol (big-endian) in the tree artifact."""
        return max(1, ((self.size - 1).bit_length() + 7) // 8)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, int) and 0 <= symbol < self.size


# Full 16-bit code-unit range (what a UTF-16 string holds).
UTF16_UNITS = Alphabet("utf16", 1 << 16)
BYTES = Alphabet("bytes", 256)

_STOCK: dict[int, Alphabet] = {a.size: a for a in (UTF16_UNITS, BYTES)}
_BY_NAME: dict[str, Alphabet] = {a.name: a for a in (UTF16_UNITS, BYTES)}


def alphabet_for_size(size: int) -> Alphabet:
    """Return the stock alphabet for ``size`` or an anonymous one."""
    found = _STOCK.get(int(size))
    if found is not None:
        return found
    return Alphabet(f"custom{int(size)}", int(size))


def alphabet_by_name(name: str) -> Alphabet:
    key = name.strip().lower()
    if key == "text":
        key = UTF16_UNITS.name
    try:
        return _BY_NAME[key]
    except KeyError:
        raise ValueError(f"unknown alphabet: {name!r}") from None

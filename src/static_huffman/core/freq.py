from __future__ import annotations

from collections.abc import Iterable

from static_huffman.core.alphabet import Alphabet
from static_huffman.errors import AlphabetViolation


def count_symbols(data: Iterable[int], alphabet: Alphabet) -> list[int]:
    """
    Frequency table over the whole alphabet: freq[sym] = occurrences.
    Unseen symbols stay at 0; empty input gives all zeros.
    """
    size = alphabet.size
    freq = [0] * size
    for pos, sym in enumerate(data):
        if not isinstance(sym, int) or sym < 0 or sym >= size:
            raise AlphabetViolation(sym, size, pos)
        freq[sym] += 1
    return freq


def used_symbols(freq: list[int]) -> list[tuple[int, int]]:
    return [(sym, f) for sym, f in enumerate(freq) if f > 0]

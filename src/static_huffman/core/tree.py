from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from static_huffman.core.node import Internal, Leaf, Node, placeholder

FreqTable = Union[Sequence[int], Mapping[int, int]]


def _iter_used(freq: FreqTable) -> list[tuple[int, int]]:
    if isinstance(freq, Mapping):
        items = sorted(freq.items())
    else:
        items = list(enumerate(freq))
    used = []
    for sym, f in items:
        if f < 0:
            raise ValueError(f"negative frequency for symbol {sym}: {f}")
        if f > 0:
            used.append((sym, f))
    return used


def build_huffman_tree(freq: FreqTable) -> Optional[Node]:
    """
    Build the prefix-code tree by repeatedly merging the two lightest nodes.

    Heap entries are (weight, seq, node): equal weights pop in insertion
    order. Leaves go in by ascending symbol, then the placeholder (if any),
    then merged nodes as they are created. Returns None when no symbol occurs.
    """
    heap: list[tuple[int, int, Node]] = []
    counter = itertools.count()

    for sym, f in _iter_used(freq):
        heapq.heappush(heap, (f, next(counter), Leaf(symbol=sym, weight=f)))

    if not heap:
        return None

    # Special case: a single symbol gets a placeholder sibling
    if len(heap) == 1:
        dummy = placeholder()
        heapq.heappush(heap, (dummy.weight, next(counter), dummy))

    while len(heap) > 1:
        f1, _, left = heapq.heappop(heap)
        f2, _, right = heapq.heappop(heap)
        parent = Internal(left=left, right=right, weight=f1 + f2)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


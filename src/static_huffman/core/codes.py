from __future__ import annotations

from typing import Dict, Optional

from static_huffman.core.node import Node, is_leaf, iter_leaves


def build_code_table(root: Optional[Node]) -> Dict[int, str]:
    """
    Map every real symbol to its root-to-leaf path ('0' = left, '1' = right).

    The placeholder leaf gets no entry. An empty tree gives an empty table.
    """
    if root is None:
        return {}
    if is_leaf(root):
        raise ValueError("tree root is a leaf: codes would be empty")

    codes: Dict[int, str] = {}
    for leaf, path in iter_leaves(root):
        if leaf.symbol is None:
            continue
        if leaf.symbol in codes:
            raise ValueError(f"symbol {leaf.symbol} appears in more than one leaf")
        codes[leaf.symbol] = path
    return codes


def is_prefix_free(codes: Dict[int, str]) -> bool:
    # sorted codes: a prefix always sorts right before one of its extensions
    ordered = sorted(codes.values())
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))

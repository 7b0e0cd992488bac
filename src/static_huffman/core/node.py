from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

# -------------------
# Huffman tree nodes
# -------------------
#
# A node is either a Leaf (no children) or an Internal node (exactly two
# children). Weights are build-time only: they do not take part in equality
# and are not persisted.


@dataclass(frozen=True)
class Leaf:
    symbol: Optional[int]  # None = placeholder leaf (single-symbol input)
    weight: int = field(default=0, compare=False)

    @property
    def is_placeholder(self) -> bool:
        return self.symbol is None


@dataclass(frozen=True)
class Internal:
    left: "Node"
    right: "Node"
    weight: int = field(default=0, compare=False)


Node = Union[Leaf, Internal]

PLACEHOLDER_WEIGHT = 1


def placeholder() -> Leaf:
    return Leaf(symbol=None, weight=PLACEHOLDER_WEIGHT)


def is_leaf(node: Node) -> bool:
    return isinstance(node, Leaf)


def iter_leaves(root: Optional[Node]) -> Iterator[tuple[Leaf, str]]:
    """Yield (leaf, path) left-to-right; path uses '0' = left, '1' = right."""
    if root is None:
        return
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            yield node, path
            continue
        # right first so that left is visited first
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))


def tree_depth(root: Optional[Node]) -> int:
    return max((len(path) for _, path in iter_leaves(root)), default=0)

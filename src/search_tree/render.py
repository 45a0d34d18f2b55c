"""
Text rendering for BinarySearchTree output.

The tree produces plain sequences; these helpers turn them into the exact
console text callers depend on. Writing is left to the caller.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .core.types import RotationResult

EMPTY_TREE = "Empty tree"
NO_ROTATION = "there is no rotation"
LEAF_NO_ROTATION = "no rotation can be done"


def format_in_order(elements: Sequence[object]) -> str:
    """'Empty tree', or 'in-order: ' plus space-joined elements and a newline."""
    if not elements:
        return EMPTY_TREE
    return "in-order: " + " ".join(str(e) for e in elements) + "\n"


def format_sorted_lines(elements: Sequence[object]) -> str:
    if not elements:
        return EMPTY_TREE + "\n"
    return "".join(f"{e}\n" for e in elements)


def format_levels(levels: Iterable[Sequence[object]]) -> str:
    # every element is followed by a space, every level by a newline
    return "".join("".join(f"{e} " for e in level) + "\n" for level in levels)


def format_rotation(outcome: RotationResult, tree_text: str) -> str:
    if outcome.rotated:
        return tree_text + "\n"
    if outcome is RotationResult.LEAF:
        return f"{LEAF_NO_ROTATION}\n{NO_ROTATION}\n"
    return NO_ROTATION + "\n"

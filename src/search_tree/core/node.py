"""Node stored in unbalanced binary search trees."""

from __future__ import annotations

from typing import Generic, Optional

from .types import T


class BinaryNode(Generic[T]):
    """A node owning one element and its left and right subtrees."""

    __slots__ = ("element", "left", "right")

    def __init__(
        self,
        element: T,
        left: Optional[BinaryNode[T]] = None,
        right: Optional[BinaryNode[T]] = None,
    ) -> None:
        self.element = element
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryNode({self.element!r})"

"""
An unbalanced binary search tree.

Time Complexity:
insert/remove/contains/find_min/find_max: O(h), where h is the tree height
traversals, copies, counts and clear: O(n)
There is no rebalancing, so inserting sorted input degrades to h = n.
"""

from __future__ import annotations

import logging
import sys
from typing import Generic, Iterator, List, Optional, TextIO

from .. import render
from . import derived
from .config import TreeConfig
from .errors import UnderflowError
from .node import BinaryNode
from .types import RotationResult, T

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[T]):
    """Binary search tree; all matching uses the elements' < and > operators.

    Args:
        config: tree policies, defaults to TreeConfig()

    Invariants:
        - every element in a node's left subtree is smaller than the node's
          element, every element in its right subtree is larger
        - no two elements compare equal
        - nodes are never shared between trees
    """

    __slots__ = ("_root", "_config")

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self._root: Optional[BinaryNode[T]] = None
        self._config = config if config is not None else TreeConfig()

    @property
    def root(self) -> Optional[BinaryNode[T]]:
        return self._root

    @property
    def config(self) -> TreeConfig:
        return self._config

    # -------------------------------
    # Mutation
    # -------------------------------
    def insert(self, x: T) -> None:
        """Insert x; an element equal to one already present is ignored."""
        if self._root is None:
            self._root = BinaryNode(x)
            logger.debug("Inserted %r", x)
            return

        node = self._root
        while True:
            if x < node.element:
                if node.left is None:
                    node.left = BinaryNode(x)
                    break
                node = node.left
            elif x > node.element:
                if node.right is None:
                    node.right = BinaryNode(x)
                    break
                node = node.right
            else:
                logger.debug("Ignored duplicate %r", x)
                return
        logger.debug("Inserted %r", x)

    def remove(self, x: T) -> None:
        """
        Remove x; nothing is done if x is not found.
        A node with two children takes the smallest element of its right
        subtree, and that element is then removed from the right subtree.
        """
        parent: Optional[BinaryNode[T]] = None
        node = self._root
        while node is not None and (x < node.element or x > node.element):
            parent = node
            node = node.left if x < node.element else node.right

        if node is None:
            logger.debug("Remove: %r not found", x)
            return

        if node.left is not None and node.right is not None:
            # the successor has no left child, so it splices out below
            parent = node
            successor = node.right
            while successor.left is not None:
                parent = successor
                successor = successor.left
            node.element = successor.element
            node = successor

        logger.debug("Removed %r", x)
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def make_empty(self) -> None:
        logger.debug("Cleared tree")
        self._root = None

    # -------------------------------
    # Search
    # -------------------------------
    def contains(self, x: T) -> bool:
        node = self._root
        while node is not None:
            if x < node.element:
                node = node.left
            elif x > node.element:
                node = node.right
            else:
                return True
        return False

    def find_min(self) -> T:
        """Smallest element. Raises UnderflowError if the tree is empty."""
        if self._root is None:
            raise UnderflowError("find_min")
        return self._find_min(self._root).element

    def find_max(self) -> T:
        """Largest element. Raises UnderflowError if the tree is empty."""
        if self._root is None:
            raise UnderflowError("find_max")
        return self._find_max(self._root).element

    def _find_min(self, node: BinaryNode[T]) -> BinaryNode[T]:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: BinaryNode[T]) -> BinaryNode[T]:
        while node.right is not None:
            node = node.right
        return node

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------
    # Traversals
    # -------------------------------
    def in_order(self) -> List[T]:
        """All elements in ascending order."""
        values: List[T] = []
        derived.in_order(self._root, values)
        return values

    def level_order(self) -> List[List[T]]:
        """Elements grouped by depth. Raises UnderflowError if the tree is empty."""
        if self._root is None:
            raise UnderflowError("level_order")
        return derived.level_order(self._root)

    def print_tree(self, out: TextIO = sys.stdout) -> None:
        """Write the elements in sorted order, one per line, or 'Empty tree'."""
        out.write(render.format_sorted_lines(self.in_order()))

    def print_levels(self, out: TextIO = sys.stdout) -> None:
        out.write(render.format_levels(self.level_order()))

    # -------------------------------
    # Shape queries
    # -------------------------------
    def node_count(self) -> int:
        return derived.node_count(self._root)

    def height(self) -> int:
        return derived.height(self._root)

    def is_full(self) -> bool:
        """True if every node has zero or two children. Raises UnderflowError if empty."""
        if self._root is None:
            raise UnderflowError("is_full")
        return derived.is_full(self._root)

    # -------------------------------
    # Comparisons
    # -------------------------------
    def compare_structure(self, other: BinarySearchTree[T]) -> bool:
        """True if both trees have the same shape; elements are ignored."""
        return derived.same_structure(self._root, other._root)

    def equals(self, other: BinarySearchTree[T]) -> bool:
        """
        True if both trees have the same shape and matching elements.
        Elements are matched with this tree's element_equality policy, which
        is object identity unless configured otherwise.
        """
        return derived.same_tree(self._root, other._root, self._config.element_equal)

    def is_mirror(self, other: BinarySearchTree[T]) -> bool:
        """True if other is the left/right reflection of this tree."""
        return derived.is_mirror(self._root, other._root, self._config.element_equal)

    # -------------------------------
    # Cloning
    # -------------------------------
    def copy(self) -> BinarySearchTree[T]:
        """
        Deep copy sharing no nodes with this tree.
        Raises UnderflowError if the tree is empty, unless the config's
        underflow_on_empty_clone is turned off.
        """
        self._check_clonable("copy")
        clone: BinarySearchTree[T] = BinarySearchTree(self._config)
        clone._root = derived.clone(self._root)
        logger.debug("Copied tree of %d nodes", clone.node_count())
        return clone

    def mirror(self) -> BinarySearchTree[T]:
        """Deep copy with left and right swapped at every level."""
        self._check_clonable("mirror")
        image: BinarySearchTree[T] = BinarySearchTree(self._config)
        image._root = derived.mirror(self._root)
        logger.debug("Mirrored tree of %d nodes", image.node_count())
        return image

    def _check_clonable(self, operation: str) -> None:
        if self._root is None and self._config.underflow_on_empty_clone:
            raise UnderflowError(operation)

    # -------------------------------
    # Rotations
    # -------------------------------
    def rotate_right(self, x: T, out: TextIO = sys.stdout) -> RotationResult:
        """
        Rotate right at the node holding x, lifting its left child.
        Writes the rotated tree, or 'there is no rotation' when nothing moved.
        """
        return self._rotate(x, derived.RIGHT, out)

    def rotate_left(self, x: T, out: TextIO = sys.stdout) -> RotationResult:
        """Mirror image of rotate_right: lifts the right child of x's node."""
        return self._rotate(x, derived.LEFT, out)

    def _rotate(self, x: T, rotation: derived.Rotation, out: TextIO) -> RotationResult:
        self._root, outcome = derived.rotate_at(self._root, x, rotation)
        logger.debug("%s(%r): %s", rotation.name, x, outcome.value)
        out.write(render.format_rotation(outcome, str(self)))
        return outcome

    # -------------------------------
    # Python protocols
    # -------------------------------
    def __len__(self) -> int:
        return self.node_count()

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, x: T) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __str__(self) -> str:
        return render.format_in_order(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()!r})"

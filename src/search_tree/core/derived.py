"""Structural operations over BinaryNode subtrees.

Everything here works on bare nodes so BinarySearchTree can stay a thin owner
of the root. Functions that restructure a subtree return its new root and the
caller reassigns the owning reference.

No walk here recurses: a tree built from sorted input is as deep as it is
large, so traversals use explicit stacks and queues.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, NamedTuple, Optional, Tuple

from .node import BinaryNode
from .types import ElementEqual, RotationResult, T

NodePair = Tuple[Optional[BinaryNode[T]], Optional[BinaryNode[T]]]


# -----------------------------
# Queries
# -----------------------------
def node_count(node: Optional[BinaryNode[T]]) -> int:
    count = 0
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        count += 1
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    return count


def height(node: Optional[BinaryNode[T]]) -> int:
    """Height of a subtree; an empty subtree has height -1."""
    if node is None:
        return -1
    return len(level_order(node)) - 1


def is_full(node: BinaryNode[T]) -> bool:
    """
    True if every node has zero or two children.
    The node must not be None; callers check for an empty tree first.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if current.left is None and current.right is None:
            continue
        if current.left is None or current.right is None:
            return False
        stack.append(current.left)
        stack.append(current.right)
    return True


# -----------------------------
# Comparisons
# -----------------------------
def _matches(
    a: Optional[BinaryNode[T]],
    b: Optional[BinaryNode[T]],
    element_equal: Optional[ElementEqual],
    reflected: bool,
) -> bool:
    # element_equal None compares shape only
    stack: List[NodePair] = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is None and y is None:
            continue
        if x is None or y is None:
            return False
        if element_equal is not None and not element_equal(x.element, y.element):
            return False
        if reflected:
            stack.append((x.left, y.right))
            stack.append((x.right, y.left))
        else:
            stack.append((x.left, y.left))
            stack.append((x.right, y.right))
    return True


def same_structure(a: Optional[BinaryNode[T]], b: Optional[BinaryNode[T]]) -> bool:
    return _matches(a, b, None, reflected=False)


def same_tree(
    a: Optional[BinaryNode[T]], b: Optional[BinaryNode[T]], element_equal: ElementEqual
) -> bool:
    return _matches(a, b, element_equal, reflected=False)


def is_mirror(
    a: Optional[BinaryNode[T]], b: Optional[BinaryNode[T]], element_equal: ElementEqual
) -> bool:
    return _matches(a, b, element_equal, reflected=True)


# -----------------------------
# Cloning
# -----------------------------
def _clone(node: Optional[BinaryNode[T]], swap: bool) -> Optional[BinaryNode[T]]:
    if node is None:
        return None
    root = BinaryNode(node.element)
    stack = [(node, root)]
    while stack:
        source, target = stack.pop()
        left, right = (source.right, source.left) if swap else (source.left, source.right)
        if left is not None:
            target.left = BinaryNode(left.element)
            stack.append((left, target.left))
        if right is not None:
            target.right = BinaryNode(right.element)
            stack.append((right, target.right))
    return root


def clone(node: Optional[BinaryNode[T]]) -> Optional[BinaryNode[T]]:
    """New nodes, same element objects, same shape."""
    return _clone(node, swap=False)


def mirror(node: Optional[BinaryNode[T]]) -> Optional[BinaryNode[T]]:
    """New nodes with left and right swapped at every level."""
    return _clone(node, swap=True)


# -----------------------------
# Traversals
# -----------------------------
def in_order(node: Optional[BinaryNode[T]], out: List[T]) -> None:
    stack: List[BinaryNode[T]] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.element)
        node = node.right


def level_order(root: BinaryNode[T]) -> List[List[T]]:
    """Elements grouped by depth, root level first, left to right."""
    levels: List[List[T]] = []
    current: Deque[BinaryNode[T]] = deque([root])
    while current:
        level: List[T] = []
        following: Deque[BinaryNode[T]] = deque()
        while current:
            node = current.popleft()
            level.append(node.element)
            if node.left is not None:
                following.append(node.left)
            if node.right is not None:
                following.append(node.right)
        levels.append(level)
        current = following
    return levels


# -----------------------------
# Rotations
# -----------------------------
def _turn_right(node: BinaryNode[T]) -> BinaryNode[T]:
    """Lift node.left; its right subtree becomes node's new left subtree."""
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _turn_left(node: BinaryNode[T]) -> BinaryNode[T]:
    """Lift node.right; its left subtree becomes node's new right subtree."""
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


class Rotation(NamedTuple):
    """A single rotation paired with the child it lifts."""

    name: str
    pivot: Callable[[BinaryNode], Optional[BinaryNode]]
    turn: Callable[[BinaryNode], BinaryNode]


RIGHT = Rotation("rotate_right", lambda node: node.left, _turn_right)
LEFT = Rotation("rotate_left", lambda node: node.right, _turn_left)


def _apply(
    node: BinaryNode[T], rotation: Rotation
) -> Tuple[BinaryNode[T], RotationResult]:
    if node.is_leaf():
        return node, RotationResult.LEAF
    if rotation.pivot(node) is None:
        return node, RotationResult.NO_PIVOT
    return rotation.turn(node), RotationResult.ROTATED


def _rotate_below(node: BinaryNode[T], x: T, rotation: Rotation) -> RotationResult:
    # x differs from node.element; look one level down on x's side each step
    while True:
        if x < node.element:
            child = node.left
            if child is None:
                return RotationResult.NOT_FOUND
            if not (x < child.element or x > child.element):
                node.left, outcome = _apply(child, rotation)
                return outcome
        else:
            child = node.right
            if child is None:
                return RotationResult.NOT_FOUND
            if not (x < child.element or x > child.element):
                node.right, outcome = _apply(child, rotation)
                return outcome
        node = child


def rotate_at(
    root: Optional[BinaryNode[T]], x: T, rotation: Rotation
) -> Tuple[Optional[BinaryNode[T]], RotationResult]:
    """
    Find x with a one-level lookahead and apply rotation at the node holding it.

    x is matched against the root, and after that only against the child on
    the side each comparison selects. Returns the (possibly new) root and the
    outcome; the tree is untouched unless the outcome is ROTATED.
    """
    if root is None:
        return root, RotationResult.NOT_FOUND
    if not (x < root.element or x > root.element):
        return _apply(root, rotation)
    return root, _rotate_below(root, x, rotation)

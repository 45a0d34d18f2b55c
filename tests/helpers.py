"""Helpers shared by the search tree tests."""

from __future__ import annotations

from dataclasses import dataclass

from search_tree import BinarySearchTree

SAMPLE_VALUES = [33, 20, 30, 40, 50, 41, 31, 21, 11]


@dataclass(order=True)
class Key:
    """Orderable element whose equal-valued instances are distinct objects."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


def build(values, config=None) -> BinarySearchTree:
    tree = BinarySearchTree(config)
    for v in values:
        tree.insert(v)
    return tree


def iter_nodes(node):
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        stack.extend(n for n in (current.right, current.left) if n is not None)


def check_ordering(node) -> bool:
    stack = [(node, None, None)]
    while stack:
        current, low, high = stack.pop()
        if current is None:
            continue
        if low is not None and not current.element > low:
            return False
        if high is not None and not current.element < high:
            return False
        stack.append((current.left, low, current.element))
        stack.append((current.right, current.element, high))
    return True

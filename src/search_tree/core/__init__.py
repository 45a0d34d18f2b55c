"""Search tree core package."""

from .tree import BinarySearchTree
from .node import BinaryNode

__all__ = ["BinarySearchTree", "BinaryNode"]

"""search_tree - an unbalanced binary search tree in Python."""

from .core.config import TreeConfig, load_config
from .core.errors import (
    SearchTreeError,
    UnderflowError,
    ConfigError,
)
from .core.node import BinaryNode
from .core.tree import BinarySearchTree
from .core.types import Comparable, RotationResult

__all__ = [
    "TreeConfig",
    "load_config",
    "SearchTreeError",
    "UnderflowError",
    "ConfigError",
    "BinaryNode",
    "BinarySearchTree",
    "Comparable",
    "RotationResult",
]

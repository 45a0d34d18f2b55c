"""Exception hierarchy for the search tree.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class SearchTreeError(Exception):
    """Base exception for all search tree errors."""
    pass


class UnderflowError(SearchTreeError):
    """Raised when an operation needs a non-empty tree but the tree is empty."""

    def __init__(self, operation: str = "") -> None:
        message = "tree is empty"
        if operation:
            message = f"{operation} on empty tree"
        super().__init__(message)
        self.operation = operation


class ConfigError(SearchTreeError):
    """Raised when a tree configuration is invalid or cannot be loaded."""
    pass

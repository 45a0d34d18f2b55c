"""Common type definitions for the search tree.

Defines the element protocol and the rotation outcome shared by all modules.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol, TypeVar


# A protocol expressing that a type supports three-way ordering
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)

# Decides whether two stored elements count as "the same" in equals/is_mirror
ElementEqual = Callable[[Any, Any], bool]


class RotationResult(Enum):
    """Outcome of a rotate_right / rotate_left request."""

    ROTATED = "rotated"
    NOT_FOUND = "not found"
    LEAF = "leaf"  # target has no children
    NO_PIVOT = "no pivot"  # target lacks the child that would move up

    @property
    def rotated(self) -> bool:
        return self is RotationResult.ROTATED

"""Configuration for the search tree.

Defines the tunable policies of BinarySearchTree and loading them from TOML.
"""

from __future__ import annotations

import operator
import tomllib  # Python 3.11+
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError
from .types import ElementEqual

ELEMENT_EQUALITY: Dict[str, ElementEqual] = {
    "identity": operator.is_,
    "value": operator.eq,
}


@dataclass(frozen=True)
class TreeConfig:
    """Configuration parameters for a binary search tree.

    Attributes:
        element_equality: How equals/is_mirror compare elements, "identity"
            (same object) or "value" (==)
        underflow_on_empty_clone: Whether copy/mirror of an empty tree raise
            UnderflowError instead of returning an empty tree
    """

    element_equality: str = "identity"
    underflow_on_empty_clone: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        equality = self.element_equality
        if not isinstance(equality, str) or equality not in ELEMENT_EQUALITY:
            choices = ", ".join(sorted(ELEMENT_EQUALITY))
            raise ConfigError(
                f"unknown element_equality {self.element_equality!r} (expected one of: {choices})"
            )
        if not isinstance(self.underflow_on_empty_clone, bool):
            raise ConfigError("underflow_on_empty_clone must be a boolean")

    @property
    def element_equal(self) -> ElementEqual:
        return ELEMENT_EQUALITY[self.element_equality]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TreeConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: Path) -> TreeConfig:
    """Load a TreeConfig from the [tree] table of a TOML file.

    A file without a [tree] table yields the default configuration.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = data.get("tree", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tree] in {path} must be a table")
    return TreeConfig.from_dict(table)

"""Rendering configuration for DependencyTree.

Provides a single frozen dataclass that encapsulates every rendering
parameter, so render_tree() and DependencyTree.render() share one typed
options object instead of a growing list of keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import StrEnum

from deptree.constants import (
    DEFAULT_ARROW,
    DEFAULT_INDENT,
    DEFAULT_REPEAT_MARKER,
    MIN_INDENT,
)

__all__ = ["RenderConfig", "RenderStyle"]


class RenderStyle(StrEnum):
    """Layout options for tree rendering."""

    LIST = "list"  # One line per declared key: key -> [deps] (default)
    TREE = "tree"  # Indented expansion from each root


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for dependency tree rendering.

    All fields have sensible defaults; ``RenderConfig()`` reproduces the
    output of ``str(tree)``.

    Attributes:
        style: Output layout (default: RenderStyle.LIST).
        include_implicit_leaves: LIST style only. Append keys that were
            referenced as dependencies but never declared, as ``key -> []``
            lines after the declared keys (default: False).
        arrow: Separator between a key and its dependency list in LIST
            style (default: " -> ").
        indent: Columns per nesting level in TREE style (default: 4,
            minimum 2).
        repeat_marker: Suffix for a key whose subtree was already expanded
            earlier in TREE style (default: " (*)").
        format_key: Converts a key to display text (default: str).

    Example:
        >>> config = RenderConfig(style=RenderStyle.TREE, indent=2)
        >>> print(tree.render(config))
        a
        ├ b
        └ c
    """

    style: RenderStyle = RenderStyle.LIST
    include_implicit_leaves: bool = False
    arrow: str = DEFAULT_ARROW
    indent: int = DEFAULT_INDENT
    repeat_marker: str = DEFAULT_REPEAT_MARKER
    format_key: Callable[[Hashable], str] = str

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If indent is narrower than a tree glyph plus one
                space, or if arrow is empty.
        """
        if self.indent < MIN_INDENT:
            msg = f"indent must be >= {MIN_INDENT}, got {self.indent}"
            raise ValueError(msg)
        if not self.arrow:
            msg = "arrow must be a non-empty string"
            raise ValueError(msg)

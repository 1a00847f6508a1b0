"""Text rendering for validated dependency trees.

Output is a pure function of the tree contents and the RenderConfig:
rendering two structurally identical trees yields identical strings.
The text is meant for display and debugging, not as a serialization
format.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from deptree.config import RenderConfig, RenderStyle
from deptree.constants import GLYPH_ELBOW, GLYPH_HORIZONTAL, GLYPH_TEE, GLYPH_VERTICAL

if TYPE_CHECKING:
    from deptree.tree import DependencyTree

__all__ = ["render_tree"]


def render_tree(tree: DependencyTree, config: RenderConfig | None = None) -> str:
    """Render a dependency tree as text.

    Args:
        tree: Validated tree to render
        config: Rendering options (default: RenderConfig())

    Returns:
        Rendered text, lines joined with newlines and no trailing newline.
        An empty tree renders as an empty string.

    Example:
        >>> tree = DependencyTreeBuilder().with_dep("a", ["b", "c"]).build()
        >>> print(render_tree(tree))
        a -> [b, c]
    """
    if config is None:
        config = RenderConfig()

    match config.style:
        case RenderStyle.LIST:
            lines = _render_list(tree, config)
        case RenderStyle.TREE:
            lines = _render_indented(tree, config)

    return "\n".join(lines)


def _render_list(tree: DependencyTree, config: RenderConfig) -> list[str]:
    fmt = config.format_key
    lines = [
        f"{fmt(key)}{config.arrow}[{', '.join(fmt(dep) for dep in deps)}]"
        for key, deps in tree.items()
    ]
    if config.include_implicit_leaves:
        lines.extend(f"{fmt(leaf)}{config.arrow}[]" for leaf in tree.implicit_leaves)
    return lines


def _render_indented(tree: DependencyTree, config: RenderConfig) -> list[str]:
    """Expand every root depth-first with box-drawing connectors.

    A key with dependencies is expanded the first time it is drawn; later
    occurrences get the repeat marker instead of a second copy of the
    subtree. Uses an explicit stack so deep chains are safe.
    """
    fmt = config.format_key
    rule = GLYPH_HORIZONTAL * (config.indent - 2)
    tee = f"{GLYPH_TEE}{rule} "
    elbow = f"{GLYPH_ELBOW}{rule} "
    pipe = GLYPH_VERTICAL + " " * (config.indent - 1)
    blank = " " * config.indent

    lines: list[str] = []
    expanded: set[Hashable] = set()

    for root in tree.roots:
        # (key, prefix for this line, prefix for this key's children)
        stack: list[tuple[Hashable, str, str]] = [(root, "", "")]
        while stack:
            key, line_prefix, child_prefix = stack.pop()
            deps = tree.get(key, ())

            if deps and key in expanded:
                lines.append(f"{line_prefix}{fmt(key)}{config.repeat_marker}")
                continue

            lines.append(f"{line_prefix}{fmt(key)}")
            expanded.add(key)

            # Push in reverse so the first dependency is drawn first
            last_index = len(deps) - 1
            for index in range(last_index, -1, -1):
                if index == last_index:
                    stack.append((deps[index], child_prefix + elbow, child_prefix + blank))
                else:
                    stack.append((deps[index], child_prefix + tee, child_prefix + pipe))

    return lines

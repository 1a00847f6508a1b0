"""Shared constants for deptree.

Centralized defaults used by the configuration and rendering layers.
Placing constants here avoids circular imports between config and render.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Rendering defaults
    "DEFAULT_ARROW",
    "DEFAULT_INDENT",
    "DEFAULT_REPEAT_MARKER",
    # Tree drawing glyphs
    "GLYPH_TEE",
    "GLYPH_ELBOW",
    "GLYPH_VERTICAL",
    "GLYPH_HORIZONTAL",
    "MIN_INDENT",
    # Cycle display
    "CYCLE_SEPARATOR",
]

# ============================================================================
# RENDERING DEFAULTS
# ============================================================================

# Separator between a key and its dependency list in LIST style
DEFAULT_ARROW: str = " -> "

# Width of one nesting level in TREE style (box glyphs are padded to this)
DEFAULT_INDENT: int = 4

# Suffix appended to a key whose subtree was already expanded in TREE style
DEFAULT_REPEAT_MARKER: str = " (*)"

# ============================================================================
# TREE DRAWING GLYPHS
# ============================================================================

GLYPH_TEE: str = "├"
GLYPH_ELBOW: str = "└"
GLYPH_VERTICAL: str = "│"
GLYPH_HORIZONTAL: str = "─"

# Narrowest indent that still fits a glyph plus one space
MIN_INDENT: int = 2

# ============================================================================
# CYCLE DISPLAY
# ============================================================================

# Joins cycle members in diagnostics: "a -> b -> a"
CYCLE_SEPARATOR: str = " -> "

"""deptree - Validated dependency trees from declared relations.

Accumulate key -> dependency-list relations with a fluent builder, validate
the whole graph for cycles once at build time, and render the resulting
tree as deterministic text.

Public API:
    DependencyTreeBuilder - Accumulates relations; build() validates
    DependencyTree - Immutable, acyclic key -> dependencies mapping
    find_cycle - Three-state DFS cycle detection over a relation mapping
    render_tree - Text rendering of a DependencyTree
    RenderConfig - Rendering options
    RenderStyle - Rendering layouts (LIST, TREE)

Exceptions:
    DepTreeError - Base exception class
    CycleError - The graph contains a cycle (the only build() failure)
    SelfDependencyError - A key depends on itself
    CircularDependencyError - Keys depend on each other transitively
    BuilderConsumedError - Builder reused after build()

Submodules:
    deptree.analysis - Graph algorithms
    deptree.diagnostics - Error codes, templates and formatting
"""

from .analysis import find_cycle
from .builder import DependencyTreeBuilder
from .config import RenderConfig, RenderStyle
from .diagnostics import (
    BuilderConsumedError,
    CircularDependencyError,
    CycleError,
    DepTreeError,
    SelfDependencyError,
)
from .render import render_tree
from .tree import DependencyTree

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("deptree")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuilderConsumedError",
    "CircularDependencyError",
    "CycleError",
    "DepTreeError",
    "DependencyTree",
    "DependencyTreeBuilder",
    "RenderConfig",
    "RenderStyle",
    "SelfDependencyError",
    "__version__",
    "find_cycle",
    "render_tree",
]

"""Quickstart example for deptree.

Demonstrates declaring relations, handling cycle errors, querying a
validated tree, and rendering it in both layouts.

Python 3.13+.
"""

from __future__ import annotations

import logging

from deptree import (
    CircularDependencyError,
    CycleError,
    DependencyTreeBuilder,
    RenderConfig,
    RenderStyle,
    SelfDependencyError,
)
from deptree.diagnostics import DiagnosticFormatter, OutputFormat


def example_1_build_and_render() -> None:
    """Build a small tree keyed by (id, version) pairs."""
    print("=" * 60)
    print("Example 1: Build and Render")
    print("=" * 60)

    tree = (
        DependencyTreeBuilder.new()
        .with_dep((1, 0), [(2, 0), (3, 0)])
        .with_dep((2, 0), [(3, 0), (4, 1)])
        .with_dep((3, 0), [])
        .build()
    )

    print(tree)
    # Output:
    # (1, 0) -> [(2, 0), (3, 0)]
    # (2, 0) -> [(3, 0), (4, 1)]
    # (3, 0) -> []

    print()
    print(tree.render(RenderConfig(style=RenderStyle.TREE)))
    # Output:
    # (1, 0)
    # ├── (2, 0)
    # │   ├── (3, 0)
    # │   └── (4, 1)
    # └── (3, 0)


def example_2_queries() -> None:
    """Ask which units depend on which."""
    print("\n" + "=" * 60)
    print("Example 2: Queries")
    print("=" * 60)

    tree = DependencyTreeBuilder.from_relations(
        {
            "app": ["http", "log"],
            "http": ["log", "tls"],
            "cli": ["app"],
            "log": [],
        }
    ).build()

    print(f"Roots:              {tree.roots}")
    print(f"Implicit leaves:    {tree.implicit_leaves}")
    print(f"cli depends on:     {tree.dependencies_of('cli')}")
    print(f"log is used by:     {tree.dependents_of('log')}")
    print(f"Most dependencies:  {tree.most_dependencies()[0]}")
    print(f"Most dependents:    {tree.most_dependents()[0]}")


def example_3_cycles() -> None:
    """Handle both cycle shapes."""
    print("\n" + "=" * 60)
    print("Example 3: Cycle Errors")
    print("=" * 60)

    try:
        DependencyTreeBuilder().with_dep("a", ["a"]).build()
    except SelfDependencyError as e:
        print(f"Self-dependency on {e.key!r}")

    builder = (
        DependencyTreeBuilder()
        .with_dep("x", ["y"])
        .with_dep("y", ["z"])
        .with_dep("z", ["y"])
    )
    try:
        builder.build()
    except CircularDependencyError as e:
        print(f"Cycle members: {e.members}")
        print(e)

    # Catch both shapes through the common base class
    try:
        DependencyTreeBuilder().with_dep("p", []).with_dep("p", ["p"]).build()
    except CycleError as e:
        if e.diagnostic is not None:
            json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
            print(json_formatter.format(e.diagnostic))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    example_1_build_and_render()
    example_2_queries()
    example_3_cycles()

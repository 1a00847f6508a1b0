"""Validated, immutable dependency tree.

A DependencyTree is acyclic by construction: its constructor rejects any
cycle, so every instance, from DependencyTreeBuilder.build() or built
directly, has passed cycle detection. It exposes the declared relations as a
read-only mapping plus dependency and dependent queries.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType

from deptree.analysis.graph import find_cycle, iter_reachable
from deptree.config import RenderConfig
from deptree.diagnostics import CycleError
from deptree.render import render_tree

__all__ = ["DependencyTree"]


class DependencyTree(Mapping[Hashable, tuple[Hashable, ...]]):
    """Read-only mapping from each declared key to its dependency keys.

    Iteration follows declaration order (the order keys were first
    declared on the builder). Dependency tuples keep the order they were
    declared in. Keys referenced only as dependencies are implicit leaves:
    they are not mapping keys, but are listed by ``implicit_leaves``.

    Thread Safety:
        Immutable after construction. Safe to share read-only.

    Example:
        >>> tree = (
        ...     DependencyTreeBuilder()
        ...     .with_dep("app", ["lib", "log"])
        ...     .with_dep("lib", ["log"])
        ...     .build()
        ... )
        >>> tree["app"]
        ('lib', 'log')
        >>> tree.dependents_of("log")
        ['app', 'lib']
        >>> print(tree)
        app -> [lib, log]
        lib -> [log]
    """

    __slots__ = ("_relations", "_roots", "_implicit_leaves")

    def __init__(self, relations: Mapping[Hashable, tuple[Hashable, ...]]) -> None:
        """Validate relations and freeze them.

        Args:
            relations: Insertion-ordered key -> dependencies mapping

        Raises:
            SelfDependencyError: If a key lists itself (a CycleError)
            CircularDependencyError: If keys depend on each other
                transitively (a CycleError)
        """
        frozen = {key: tuple(deps) for key, deps in relations.items()}
        cycle = find_cycle(frozen)
        if cycle is not None:
            raise CycleError.from_cycle(cycle)

        self._relations: Mapping[Hashable, tuple[Hashable, ...]] = MappingProxyType(frozen)

        referenced: dict[Hashable, None] = {}
        for deps in self._relations.values():
            for dep in deps:
                referenced.setdefault(dep, None)

        self._roots: tuple[Hashable, ...] = tuple(
            key for key in self._relations if key not in referenced
        )
        self._implicit_leaves: tuple[Hashable, ...] = tuple(
            key for key in referenced if key not in self._relations
        )

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: Hashable) -> tuple[Hashable, ...]:
        return self._relations[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._relations)

    def __len__(self) -> int:
        return len(self._relations)

    def __eq__(self, other: object) -> bool:
        """Trees are equal when they declare the same keys, in the same order,
        with the same dependency tuples."""
        if not isinstance(other, DependencyTree):
            return NotImplemented
        return list(self._relations.items()) == list(other._relations.items())

    def __repr__(self) -> str:
        return f"DependencyTree({dict(self._relations)!r})"

    def __str__(self) -> str:
        return render_tree(self)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, config: RenderConfig | None = None) -> str:
        """Render the tree as text. See deptree.render.render_tree."""
        return render_tree(self, config)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def roots(self) -> tuple[Hashable, ...]:
        """Declared keys that no other key depends on, in declaration order."""
        return self._roots

    @property
    def implicit_leaves(self) -> tuple[Hashable, ...]:
        """Keys referenced as dependencies but never declared.

        Ordered by first reference, scanning declared keys in order.
        """
        return self._implicit_leaves

    def all_keys(self) -> tuple[Hashable, ...]:
        """Declared keys followed by implicit leaves."""
        return (*self._relations, *self._implicit_leaves)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def dependencies_of(self, key: Hashable) -> list[Hashable]:
        """Return every key ``key`` depends on, directly or transitively.

        Depth-first pre-order, each key listed once. An implicit leaf or
        unknown key has no dependencies.
        """
        return list(iter_reachable(self._relations, key))

    def dependents_of(self, key: Hashable) -> list[Hashable]:
        """Return the declared keys that list ``key`` as a direct dependency."""
        return [other for other, deps in self._relations.items() if key in deps]

    def most_dependencies(self) -> list[tuple[Hashable, int]]:
        """Declared keys with their transitive dependency counts, highest first.

        Ties keep declaration order.
        """
        return sorted(self._dependency_counts(), key=lambda item: item[1], reverse=True)

    def least_dependencies(self) -> list[tuple[Hashable, int]]:
        """Declared keys with their transitive dependency counts, lowest first.

        Ties keep declaration order.
        """
        return sorted(self._dependency_counts(), key=lambda item: item[1])

    def most_dependents(self) -> list[tuple[Hashable, int]]:
        """All keys with their direct dependent counts, highest first.

        Implicit leaves are included. Ties keep all_keys() order.
        """
        return sorted(self._dependent_counts(), key=lambda item: item[1], reverse=True)

    def least_dependents(self) -> list[tuple[Hashable, int]]:
        """All keys with their direct dependent counts, lowest first.

        Implicit leaves are included. Ties keep all_keys() order.
        """
        return sorted(self._dependent_counts(), key=lambda item: item[1])

    def _dependency_counts(self) -> list[tuple[Hashable, int]]:
        return [(key, len(self.dependencies_of(key))) for key in self._relations]

    def _dependent_counts(self) -> list[tuple[Hashable, int]]:
        counts: dict[Hashable, int] = dict.fromkeys(self.all_keys(), 0)
        for deps in self._relations.values():
            # A key listing the same dependency twice still counts once
            for dep in dict.fromkeys(deps):
                counts[dep] += 1
        return list(counts.items())

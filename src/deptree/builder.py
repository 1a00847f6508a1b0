"""Incremental builder for validated dependency trees.

Accumulates key -> dependency-list relations without validating them,
then checks the whole graph for cycles exactly once, in build().

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping

from deptree.diagnostics import BuilderConsumedError, CycleError
from deptree.tree import DependencyTree

__all__ = ["DependencyTreeBuilder"]

logger = logging.getLogger(__name__)


class DependencyTreeBuilder:
    """Mutable accumulator of dependency relations.

    Each with_dep() call supplies the complete dependency list for a key;
    declaring the same key again replaces the earlier list. Nothing is
    validated until build(), which consumes the builder.

    Thread Safety:
        Not thread-safe. A builder has a single owner; share the built
        DependencyTree instead.

    Example:
        >>> tree = (
        ...     DependencyTreeBuilder.new()
        ...     .with_dep((1, 0), [(2, 0), (3, 0)])
        ...     .with_dep((2, 0), [(3, 0)])
        ...     .build()
        ... )
        >>> tree.dependencies_of((1, 0))
        [(2, 0), (3, 0)]

        >>> DependencyTreeBuilder().with_dep("a", ["a"]).build()
        Traceback (most recent call last):
        ...
        deptree.diagnostics.errors.SelfDependencyError: error[SELF_DEPENDENCY]: ...
    """

    __slots__ = ("_relations",)

    def __init__(self) -> None:
        # None once consumed by build()
        self._relations: dict[Hashable, tuple[Hashable, ...]] | None = {}

    @classmethod
    def new(cls) -> DependencyTreeBuilder:
        """Create an empty builder."""
        return cls()

    @classmethod
    def from_relations(
        cls,
        relations: (
            Mapping[Hashable, Iterable[Hashable]]
            | Iterable[tuple[Hashable, Iterable[Hashable]]]
        ),
    ) -> DependencyTreeBuilder:
        """Create a builder by declaring each relation in order.

        Equivalent to chaining with_dep() over the relations, so a key
        appearing twice in a pair sequence keeps its last dependency list.

        Args:
            relations: Mapping of key -> dependencies, or an iterable of
                (key, dependencies) pairs

        Example:
            >>> builder = DependencyTreeBuilder.from_relations(
            ...     [("a", ["b"]), ("b", []), ("a", ["c"])]
            ... )
            >>> builder.build()["a"]
            ('c',)
        """
        pairs = relations.items() if isinstance(relations, Mapping) else relations
        builder = cls()
        for key, deps in pairs:
            builder.with_dep(key, deps)
        return builder

    @property
    def consumed(self) -> bool:
        """True once build() has been called."""
        return self._relations is None

    def __bool__(self) -> bool:
        # Truthy even when empty or consumed; __len__ raises once consumed
        return True

    def __len__(self) -> int:
        return len(self._require_relations())

    def __contains__(self, key: object) -> bool:
        return key in self._require_relations()

    def __repr__(self) -> str:
        if self._relations is None:
            return "DependencyTreeBuilder(<consumed>)"
        return f"DependencyTreeBuilder({self._relations!r})"

    def with_dep(self, key: Hashable, deps: Iterable[Hashable]) -> DependencyTreeBuilder:
        """Declare the complete dependency list for a key.

        Replaces any list previously declared for the same key. A key may
        list itself; that is only reported by build().

        Args:
            key: Dependent key
            deps: Keys that ``key`` depends on, in order

        Returns:
            This builder, for chaining

        Raises:
            BuilderConsumedError: If build() was already called
            TypeError: If deps is a str or bytes (would be split into
                characters)
        """
        relations = self._require_relations()
        if isinstance(deps, (str, bytes)):
            msg = f"deps must be an iterable of keys, not {type(deps).__name__}"
            raise TypeError(msg)

        if key in relations:
            logger.debug("Overwriting dependencies for %r", key)
        relations[key] = tuple(deps)
        logger.debug("Registered %r with %d dependencies", key, len(relations[key]))
        return self

    def build(self) -> DependencyTree:
        """Validate the accumulated relations and freeze them into a tree.

        Consumes the builder whether or not validation succeeds.

        Returns:
            DependencyTree holding every declared relation

        Raises:
            SelfDependencyError: If a key lists itself (a CycleError)
            CircularDependencyError: If keys depend on each other
                transitively (a CycleError)
            BuilderConsumedError: If build() was already called
        """
        relations = self._require_relations()
        self._relations = None

        try:
            tree = DependencyTree(relations)
        except CycleError as error:
            logger.warning("Dependency tree build failed: %s", error.diagnostic)
            raise

        logger.debug(
            "Built dependency tree: %d keys, %d implicit leaves",
            len(tree),
            len(tree.implicit_leaves),
        )
        return tree

    def _require_relations(self) -> dict[Hashable, tuple[Hashable, ...]]:
        if self._relations is None:
            raise BuilderConsumedError
        return self._relations

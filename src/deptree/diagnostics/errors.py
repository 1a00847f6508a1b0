"""Dependency tree exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "BuilderConsumedError",
    "CircularDependencyError",
    "CycleError",
    "DepTreeError",
    "SelfDependencyError",
]


class DepTreeError(Exception):
    """Base exception for all deptree errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DepTreeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CycleError(DepTreeError):
    """The accumulated graph contains a cycle.

    The only way build() can fail. Catch this to handle both
    self-dependencies and indirect cycles.

    Attributes:
        cycle: Keys forming the cycle. Length 1 for a self-dependency;
            otherwise the first and last keys are equal.
    """

    def __init__(self, message: str | Diagnostic, cycle: Sequence[Hashable]) -> None:
        super().__init__(message)
        self.cycle: tuple[Hashable, ...] = tuple(cycle)

    @classmethod
    def from_cycle(cls, cycle: Sequence[Hashable]) -> CycleError:
        """Create the error subclass matching the cycle's shape."""
        if len(cycle) == 1:
            return SelfDependencyError(cycle[0])
        return CircularDependencyError(cycle)

    @property
    def members(self) -> tuple[Hashable, ...]:
        """Distinct keys of the cycle in traversal order."""
        if len(self.cycle) > 1:
            return self.cycle[:-1]
        return self.cycle


class SelfDependencyError(CycleError):
    """A key lists itself as a dependency.

    Example:
        builder.with_dep("a", ["a"])  # a -> a
    """

    def __init__(self, key: Hashable) -> None:
        super().__init__(ErrorTemplate.self_dependency(key), (key,))
        self.key = key


class CircularDependencyError(CycleError):
    """Two or more keys depend on each other transitively.

    Example:
        a -> b -> c -> a
    """

    def __init__(self, cycle: Sequence[Hashable]) -> None:
        super().__init__(ErrorTemplate.circular_dependency(cycle), cycle)


class BuilderConsumedError(DepTreeError):
    """Builder reused after build().

    Raised for API misuse rather than for an invalid graph: a builder
    hands its relations over to the tree it builds and cannot be reused.
    """

    def __init__(self) -> None:
        super().__init__(ErrorTemplate.builder_consumed())

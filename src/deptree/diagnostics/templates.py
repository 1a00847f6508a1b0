"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Hashable, Sequence

from deptree.constants import CYCLE_SEPARATOR

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "format_cycle"]


def format_cycle(cycle: Sequence[Hashable]) -> str:
    """Join cycle keys into a single display chain.

    A single-key cycle (self-dependency) is shown closed, as ``a -> a``,
    so the loop is visible in the message.
    """
    keys = [str(key) for key in cycle]
    if len(keys) == 1:
        keys.append(keys[0])
    return CYCLE_SEPARATOR.join(keys)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent across the package.
    """

    @staticmethod
    def self_dependency(key: Hashable) -> Diagnostic:
        """Key lists itself among its own dependencies.

        Args:
            key: The self-dependent key

        Returns:
            Diagnostic for SELF_DEPENDENCY
        """
        msg = f"Key '{key}' depends on itself"
        return Diagnostic(
            code=DiagnosticCode.SELF_DEPENDENCY,
            message=msg,
            hint=f"Remove '{key}' from its own dependency list",
            cycle=(key,),
        )

    @staticmethod
    def circular_dependency(cycle: Sequence[Hashable]) -> Diagnostic:
        """Indirect cycle found through two or more keys.

        Args:
            cycle: Keys forming the cycle, first and last equal

        Returns:
            Diagnostic for CIRCULAR_DEPENDENCY
        """
        chain = format_cycle(cycle)
        msg = f"Circular dependency detected: {chain}"
        return Diagnostic(
            code=DiagnosticCode.CIRCULAR_DEPENDENCY,
            message=msg,
            hint="Break the cycle by removing one of the dependencies along it",
            cycle=tuple(cycle),
        )

    @staticmethod
    def builder_consumed() -> Diagnostic:
        """Builder used again after build().

        Returns:
            Diagnostic for BUILDER_CONSUMED
        """
        return Diagnostic(
            code=DiagnosticCode.BUILDER_CONSUMED,
            message="Builder has already been consumed by build()",
            hint="Create a new DependencyTreeBuilder for each tree",
        )

"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Validation errors (cycles found at build time)
        2000-2999: Usage errors (builder misuse)
    """

    # Validation errors (1000-1999)
    SELF_DEPENDENCY = 1001
    CIRCULAR_DEPENDENCY = 1002

    # Usage errors (2000-2999)
    BUILDER_CONSUMED = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough structure for
    both human-readable and tool-readable output.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        cycle: Keys forming the offending cycle (cycle errors only)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    cycle: tuple[Hashable, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[CIRCULAR_DEPENDENCY]: Circular dependency detected: b -> c -> b
              = cycle: b -> c -> b
              = help: Break the cycle by removing one of the dependencies along it

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

"""Diagnostic system for dependency tree errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BuilderConsumedError,
    CircularDependencyError,
    CycleError,
    DepTreeError,
    SelfDependencyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BuilderConsumedError",
    "CircularDependencyError",
    "CycleError",
    "DepTreeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "SelfDependencyError",
]

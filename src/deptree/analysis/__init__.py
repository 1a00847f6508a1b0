"""Graph analysis utilities for dependency validation.

Provides algorithms for cycle detection and reachability over
key -> dependency-list relation graphs.

Python 3.13+.
"""

from .graph import find_cycle, iter_reachable

__all__ = [
    "find_cycle",
    "iter_reachable",
]

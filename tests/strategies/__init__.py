"""Hypothesis strategies for deptree property-based testing.

Usage:
    from tests.strategies import dag_relations, ring_relations
    from tests.strategies.graphs import node_names, unit_ids
"""

from .graphs import (
    dag_relations,
    node_names,
    ring_order,
    ring_relations,
    unit_ids,
)

__all__ = [
    "dag_relations",
    "node_names",
    "ring_order",
    "ring_relations",
    "unit_ids",
]

"""Graph algorithms for dependency analysis.

Provides cycle detection using depth-first search for validating
dependency relations before they are frozen into a tree, plus the
traversal helpers the tree's read-only queries are built on.

Python 3.13+.
"""

import logging
from collections.abc import Hashable, Iterator, Mapping, Sequence
from enum import Enum, auto

__all__ = [
    "find_cycle",
    "iter_reachable",
]

logger = logging.getLogger(__name__)


class _NodeState(Enum):
    """DFS node marking for three-state cycle detection.

    Unvisited nodes have no entry in the state map.
    """

    IN_PROGRESS = auto()  # On the active traversal path
    DONE = auto()  # Fully processed, proven acyclic from this node


def find_cycle(
    dependencies: Mapping[Hashable, Sequence[Hashable]],
) -> tuple[Hashable, ...] | None:
    """Find the first cycle in a dependency graph using iterative DFS.

    Any key that lists itself is reported first, as ``(key,)``, taking
    the earliest such key in mapping order. Otherwise roots are visited
    in mapping order and each node's dependencies in sequence order, so
    the reported cycle is reproducible for the same input. Uses an explicit stack to avoid RecursionError on deep graphs
    (long linear chains).

    Keys referenced as dependencies but absent from the mapping are
    implicit leaves: they are marked done on first encounter and can
    never take part in a cycle.

    Args:
        dependencies: Insertion-ordered mapping from key to its
                     dependency keys.
                     Example: {"a": ("b", "c"), "b": ("c",), "c": ("a",)}

    Returns:
        None if the graph is acyclic. Otherwise the first cycle found:
        ``(key,)`` for a self-dependency, or the path from the repeated
        key back to itself, first and last equal.

    Example:
        >>> find_cycle({"x": ("y",), "y": ("z",), "z": ("y",)})
        ('y', 'z', 'y')
        >>> find_cycle({"a": ("a",)})
        ('a',)
        >>> find_cycle({"a": ("b",)}) is None
        True

    Complexity:
        Time: O(V + E) where V = nodes, E = edges
        Space: O(V) for state and path tracking
    """
    # Self-dependencies take precedence over any indirect cycle
    for key, deps in dependencies.items():
        if key in deps:
            logger.debug("Self-dependency found: %r", key)
            return (key,)

    state: dict[Hashable, _NodeState] = {}

    for root in dependencies:
        if root in state:
            continue

        # path mirrors the stack; position maps each path node to its index
        path: list[Hashable] = [root]
        position: dict[Hashable, int] = {root: 0}
        state[root] = _NodeState.IN_PROGRESS
        stack: list[tuple[Hashable, Iterator[Hashable]]] = [
            (root, iter(dependencies[root]))
        ]

        while stack:
            node, remaining = stack[-1]

            for dep in remaining:
                dep_state = state.get(dep)

                if dep_state is _NodeState.DONE:
                    continue

                if dep_state is _NodeState.IN_PROGRESS:
                    cycle = (*path[position[dep] :], dep)
                    logger.debug("Cycle found from root %r: %r", root, cycle)
                    return cycle

                if dep not in dependencies:
                    # Implicit leaf
                    state[dep] = _NodeState.DONE
                    continue

                state[dep] = _NodeState.IN_PROGRESS
                position[dep] = len(path)
                path.append(dep)
                stack.append((dep, iter(dependencies[dep])))
                break

            else:
                # All dependencies processed
                stack.pop()
                path.pop()
                del position[node]
                state[node] = _NodeState.DONE

    return None


def iter_reachable(
    dependencies: Mapping[Hashable, Sequence[Hashable]],
    start: Hashable,
) -> Iterator[Hashable]:
    """Yield every key reachable from ``start``, depth-first pre-order.

    Each key is yielded once, on the edge that first reaches it. The
    start key itself is not yielded. Iterative, so deep chains are safe.

    Args:
        dependencies: Mapping from key to its dependency keys
        start: Key to walk from (need not be declared)

    Example:
        >>> list(iter_reachable({"a": ("b", "c"), "b": ("c",)}, "a"))
        ['b', 'c']
    """
    seen: set[Hashable] = {start}
    stack: list[Iterator[Hashable]] = [iter(dependencies.get(start, ()))]

    while stack:
        for dep in stack[-1]:
            if dep in seen:
                continue
            seen.add(dep)
            yield dep
            stack.append(iter(dependencies.get(dep, ())))
            break
        else:
            stack.pop()

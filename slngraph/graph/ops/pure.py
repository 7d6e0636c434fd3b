"""Pure dependency reduction.

A direct dependency is "pure" when no other direct dependency of the same
project already pulls it in transitively. Keeping only the pure edges
preserves reachability while dropping redundant references.
"""

from __future__ import annotations

from typing import FrozenSet

from ..node import GraphNode
from .closure import MAX_RECURSION_DEPTH, ClosureCache, deep_closure, forward


def find_pure_dependencies(
    cache: ClosureCache,
    node: GraphNode,
    *,
    limit: int = MAX_RECURSION_DEPTH,
) -> FrozenSet[str]:
    """Return the identities of the pure direct dependencies of `node`.

    Args:
        cache: Forward closure memo (the same one used by depends-on queries).
        node: Project to reduce.
        limit: Depth budget for the closure expansion.
    """
    result = set(deep_closure(cache, node, forward, limit=limit))
    for child in node.depends_on:
        # Already memoized by the expansion above.
        result.difference_update(deep_closure(cache, child, forward, limit=limit))
    return frozenset(result)

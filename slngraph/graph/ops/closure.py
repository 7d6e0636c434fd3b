"""Transitive closure and level computations over project nodes.

Both computations are memoized depth-first expansions. Recursion is
bounded by an explicit depth budget threaded through every call; running
out of budget raises `RecursionLimitExceeded` instead of relying on the
interpreter's stack limit. Nodes that are still being expanded are not
memoized, so a cycle always exhausts the budget.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, FrozenSet, Iterable, MutableMapping, Sequence

from ..errors import RecursionLimitExceeded
from ..node import GraphNode

logger = logging.getLogger("slngraph.graph.ops.closure")

MAX_RECURSION_DEPTH = 32

ChildSelector = Callable[[GraphNode], Sequence[GraphNode]]
ClosureCache = MutableMapping[str, FrozenSet[str]]


def forward(node: GraphNode) -> Sequence[GraphNode]:
    """Follow `depends_on` edges."""
    return node.depends_on


def backward(node: GraphNode) -> Sequence[GraphNode]:
    """Follow `dependent_of` back-edges."""
    return node.dependent_of


def _expand(
    cache: ClosureCache,
    node: GraphNode,
    children_of: ChildSelector,
    remaining: int,
    limit: int,
) -> FrozenSet[str]:
    cached = cache.get(node.identity)
    if cached is not None:
        return cached
    if remaining <= 0:
        raise RecursionLimitExceeded(node.label, limit)

    result = set()
    for child in children_of(node):
        # Anything already collected brought its own closure along.
        if child.identity in result:
            continue
        result.add(child.identity)
        result.update(_expand(cache, child, children_of, remaining - 1, limit))

    closure = frozenset(result)
    cache[node.identity] = closure
    return closure


def deep_closure(
    cache: ClosureCache,
    node: GraphNode,
    children_of: ChildSelector,
    *,
    limit: int = MAX_RECURSION_DEPTH,
) -> FrozenSet[str]:
    """Return the identities reachable from `node` along `children_of`.

    Args:
        cache: Memo shared by all queries in the same direction. Entries for
            every node visited on the way are filled in as a side effect.
        node: Start node. Its own identity is not part of the result.
        children_of: Edge selector, `forward` or `backward`.
        limit: Depth budget for the expansion.

    Raises:
        RecursionLimitExceeded: The expansion went deeper than `limit`.
    """
    return _expand(cache, node, children_of, limit, limit)


def _level(
    cache: Dict[str, int],
    node: GraphNode,
    children_of: ChildSelector,
    remaining: int,
    limit: int,
) -> int:
    cached = cache.get(node.identity)
    if cached is not None:
        return cached
    if remaining <= 0:
        raise RecursionLimitExceeded(node.label, limit)

    level = 0
    for child in children_of(node):
        level = max(level, 1 + _level(cache, child, children_of, remaining - 1, limit))
    cache[node.identity] = level
    return level


def node_levels(
    nodes: Iterable[GraphNode],
    children_of: ChildSelector,
    *,
    limit: int = MAX_RECURSION_DEPTH,
) -> Dict[str, int]:
    """Length of the longest `children_of` chain starting at each node.

    A node without children has level 0. The returned map is freshly
    computed on every call.
    """
    levels: Dict[str, int] = {}
    for node in nodes:
        _level(levels, node, children_of, limit, limit)
    logger.debug("Computed levels for %d nodes", len(levels))
    return levels

"""Deterministic build ordering (Kahn's algorithm).

Nodes are released in waves: a wave holds every node whose dependencies
have all been emitted. Within a wave, nodes keep their arrival order, so
the output is fully determined by the input order of the graph.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from ..errors import CyclicGraphError
from ..node import GraphNode

logger = logging.getLogger("slngraph.graph.ops.toposort")


def topological_order(nodes: Sequence[GraphNode]) -> Tuple[GraphNode, ...]:
    """Order `nodes` so that every dependency precedes its dependents.

    Assigns `topo_order` on every node when sorting succeeds; leaves the
    nodes untouched otherwise.

    Raises:
        CyclicGraphError: Some nodes could never be released because they
            sit on, or depend on, a cycle.
    """
    pending: Dict[str, int] = {}
    frontier: List[GraphNode] = []
    for node in nodes:
        pending[node.identity] = len(node.depends_on)
        if pending[node.identity] == 0:
            frontier.append(node)

    order: List[GraphNode] = []
    wave = 0
    while frontier:
        order.extend(frontier)
        next_frontier: List[GraphNode] = []
        for emitted in frontier:
            for dependent in emitted.dependent_of:
                pending[dependent.identity] -= 1
                if pending[dependent.identity] == 0:
                    next_frontier.append(dependent)
        logger.debug("Wave %d released %d node(s)", wave, len(frontier))
        frontier = next_frontier
        wave += 1

    if len(order) < len(nodes):
        stranded = [node.label for node in nodes if pending[node.identity] > 0]
        logger.warning(
            "Topological sort stranded %d of %d node(s)",
            len(nodes) - len(order),
            len(nodes),
        )
        raise CyclicGraphError(len(nodes) - len(order), stranded)

    for index, node in enumerate(order):
        node.topo_order = index
    return tuple(order)

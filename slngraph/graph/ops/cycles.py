"""Cycle diagnostics based on strongly connected components.

The topological sorter only reports how many projects it could not
place. When a caller wants to show *which* projects form the cycles,
these helpers project the node set onto a NetworkX DiGraph and collect
every strongly connected component that actually contains a cycle.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import networkx as nx

from ..node import GraphNode

logger = logging.getLogger("slngraph.graph.ops.cycles")


def dependency_digraph(nodes: Iterable[GraphNode]) -> nx.DiGraph:
    """Build a DiGraph keyed by identity with an edge per dependency.

    Node attributes carry the label and the root/leaf/stub flags so the
    graph can be handed to exporters as is.
    """
    digraph = nx.DiGraph()
    nodes = list(nodes)
    for node in nodes:
        digraph.add_node(
            node.identity,
            label=node.label,
            is_root=node.is_root,
            is_leaf=node.is_leaf,
            is_stub=node.is_stub,
        )
    for node in nodes:
        for dependency in node.depends_on:
            digraph.add_edge(node.identity, dependency.identity)
    return digraph


def find_cycles(nodes: Iterable[GraphNode]) -> List[List[str]]:
    """Return the labels of every project group that forms a cycle.

    Each group is a strongly connected component with more than one
    member, or a single project that references itself. Members are sorted
    case-insensitively and groups are ordered by their first member, so
    the output is stable across runs.
    """
    digraph = dependency_digraph(nodes)
    cycles: List[List[str]] = []
    for component in nx.strongly_connected_components(digraph):
        if len(component) == 1:
            (only,) = component
            if not digraph.has_edge(only, only):
                continue
        labels = sorted(
            (digraph.nodes[identity]["label"] for identity in component),
            key=str.casefold,
        )
        cycles.append(labels)

    cycles.sort(key=lambda members: (members[0].casefold(), len(members)))
    logger.debug("Found %d cycle group(s)", len(cycles))
    return cycles

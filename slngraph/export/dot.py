"""GraphViz DOT export of the project dependency graph.

One box per project, filled by role (root, leaf, stub), and one edge per
dependency. Edges that another direct dependency already implies are
drawn in the redundant style, or left out entirely in reduced mode.
"""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Optional

import networkx as nx
from networkx.drawing.nx_pydot import write_dot

from slngraph.config.schema import DotConfig
from slngraph.graph import GraphNode, ProjectDependencyGraph
from slngraph.graph.errors import RecursionLimitExceeded

logger = logging.getLogger("slngraph.export.dot")


def _quoted(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _fill_color(node: GraphNode, config: DotConfig) -> str:
    if node.is_stub:
        return config.stub_color
    if node.is_root:
        return config.root_color
    if node.is_leaf:
        return config.leaf_color
    return config.default_color


def _pure_edges(graph: ProjectDependencyGraph, node: GraphNode) -> Optional[FrozenSet[str]]:
    try:
        return graph.find_pure_dependencies(node)
    except RecursionLimitExceeded as exc:
        logger.warning("Cannot reduce edges of %s: %s", node.label, exc)
        return None


def build_dot_graph(graph: ProjectDependencyGraph, config: Optional[DotConfig] = None) -> nx.DiGraph:
    """Build a DiGraph carrying GraphViz attributes.

    Node names are positional (`p0`, `p1`, ...) in input order so that
    project names never need escaping; the project name is the label.
    """
    config = config or DotConfig()
    dot = nx.DiGraph()
    dot.graph["graph"] = {"rankdir": config.rankdir}
    dot.graph["node"] = {"shape": "box", "style": "filled"}

    names: Dict[str, str] = {}
    for index, node in enumerate(graph.nodes):
        names[node.identity] = f"p{index}"
        dot.add_node(
            names[node.identity],
            label=_quoted(node.label),
            fillcolor=_fill_color(node, config),
        )

    dropped = 0
    for node in graph.nodes:
        pure = _pure_edges(graph, node)
        for dependency in node.depends_on:
            if pure is None or dependency.identity in pure:
                dot.add_edge(names[node.identity], names[dependency.identity])
            elif config.reduced:
                dropped += 1
            else:
                dot.add_edge(
                    names[node.identity],
                    names[dependency.identity],
                    style=config.redundant_edge_style,
                )

    logger.debug("DOT graph: %d nodes, %d edges, %d redundant edges dropped",
                 dot.number_of_nodes(), dot.number_of_edges(), dropped)
    return dot


def export_dot(
    graph: ProjectDependencyGraph,
    output_path: Path,
    config: Optional[DotConfig] = None,
) -> None:
    """Export graph to DOT format.

    Args:
        graph: Project dependency graph to export.
        output_path: Output file path.
        config: Rendering options.
    """
    logger.info("Exporting graph to DOT: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    dot = build_dot_graph(graph, config)
    write_dot(dot, str(output_path))

    logger.info("DOT export completed: %d nodes, %d edges",
                dot.number_of_nodes(), dot.number_of_edges())

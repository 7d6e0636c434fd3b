"""Node-link JSON export of the project dependency graph."""

import json
import logging
from pathlib import Path

import networkx as nx

from slngraph.graph import ProjectDependencyGraph

logger = logging.getLogger("slngraph.export.json")


def export_json(graph: ProjectDependencyGraph, output_path: Path, indent: int = 2) -> None:
    """Export graph to node-link JSON.

    Args:
        graph: Project dependency graph to export.
        output_path: Output file path.
        indent: JSON indentation.
    """
    logger.info("Exporting graph to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    native = graph.to_networkx()
    data = nx.readwrite.json_graph.node_link_data(native, edges="edges")

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    logger.info("JSON export completed: %d nodes, %d edges",
                native.number_of_nodes(), native.number_of_edges())

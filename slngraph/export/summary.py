"""JSON project summaries.

One summary per buildable (non-stub) project, listing its direct and
transitive references and its position in the build order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from slngraph.graph import UNSORTED, GraphNode, ProjectDependencyGraph, unique_names

logger = logging.getLogger("slngraph.export.summary")


class ProjectSummary(BaseModel):
    """Serializable summary of one project."""

    model_config = ConfigDict(frozen=True)

    name: str
    sortindex: int = UNSORTED
    treepath: Optional[str] = None
    projectpath: Optional[str] = None
    id: Optional[UUID] = None
    directrefs: List[str] = Field(default_factory=list)
    allrefs: List[str] = Field(default_factory=list)
    sdk: Optional[str] = None
    frameworks: List[str] = Field(default_factory=list)

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping; `sortindex` is left out when not computed."""
        exclude = {"sortindex"} if self.sortindex == UNSORTED else set()
        return self.model_dump(mode="json", exclude=exclude)


def summarize_node(graph: ProjectDependencyGraph, node: GraphNode) -> Optional[ProjectSummary]:
    """Build the summary for one node, or None for stubs."""
    if node.is_stub:
        return None
    record = node.payload
    deep = graph.nodes_for(graph.deep_depends_on(node))
    return ProjectSummary(
        name=record.label,
        sortindex=node.topo_order,
        treepath=record.tree_path,
        projectpath=record.path,
        id=record.project_id,
        directrefs=unique_names(record.reference_names),
        allrefs=[dep.label for dep in deep],
        sdk=record.sdk,
        frameworks=list(record.frameworks),
    )


def build_project_summaries(graph: ProjectDependencyGraph) -> Dict[str, ProjectSummary]:
    """Summaries keyed by project label, in build order.

    Raises:
        CyclicGraphError: The graph cannot be ordered.
    """
    summaries: Dict[str, ProjectSummary] = {}
    for node in graph.topologically_sorted:
        summary = summarize_node(graph, node)
        if summary is not None:
            summaries[summary.name] = summary
    logger.info("Built %d project summaries", len(summaries))
    return summaries


def export_summaries(graph: ProjectDependencyGraph, output_path: Path, indent: int = 2) -> None:
    """Write project summaries to a JSON file."""
    logger.info("Exporting project summaries to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        name: summary.to_json_dict()
        for name, summary in build_project_summaries(graph).items()
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

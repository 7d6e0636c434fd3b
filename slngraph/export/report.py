"""Forward and reverse dependency trees.

Each project is expanded into a tree of its dependencies (or of its
dependents). Subtrees are shared between projects, so every tree is
built only once.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from slngraph.graph import MAX_RECURSION_DEPTH, GraphNode, ProjectDependencyGraph
from slngraph.graph.errors import RecursionLimitExceeded
from slngraph.graph.ops import ChildSelector, backward, forward

logger = logging.getLogger("slngraph.export.report")


@dataclass
class DependencyTreeNode:
    """Minimal tree node for JSON serialization."""

    name: str
    children: List["DependencyTreeNode"] = field(default_factory=list)

    def to_dict(self, children_key: str = "dependsOn") -> Dict[str, Any]:
        return {
            "name": self.name,
            children_key: [child.to_dict(children_key) for child in self.children],
        }

    def dense_representation(self) -> Dict[str, Any]:
        """Nested `{name: {child: {grandchild: {...}}}}` mapping."""
        return {self.name: self._dense_content()}

    def _dense_content(self) -> Dict[str, Any]:
        return {child.name: child._dense_content() for child in self.children}


def _tree_for(
    cache: Dict[str, DependencyTreeNode],
    node: GraphNode,
    children_of: ChildSelector,
    remaining: int,
) -> DependencyTreeNode:
    cached = cache.get(node.identity)
    if cached is not None:
        return cached
    if remaining <= 0:
        raise RecursionLimitExceeded(node.label, MAX_RECURSION_DEPTH)
    children = [_tree_for(cache, child, children_of, remaining - 1) for child in children_of(node)]
    tree = DependencyTreeNode(node.label, children)
    cache[node.identity] = tree
    return tree


def _make_report(graph: ProjectDependencyGraph, children_of: ChildSelector) -> Dict[str, DependencyTreeNode]:
    report: Dict[str, DependencyTreeNode] = {}
    for node in graph.nodes:
        _tree_for(report, node, children_of, MAX_RECURSION_DEPTH)
    return report


def make_depends_on_report(graph: ProjectDependencyGraph) -> Dict[str, DependencyTreeNode]:
    """Forward dependency tree for every project, keyed by identity."""
    return _make_report(graph, forward)


def make_dependent_of_report(graph: ProjectDependencyGraph) -> Dict[str, DependencyTreeNode]:
    """Reverse dependency tree for every project, keyed by identity."""
    return _make_report(graph, backward)


def export_dependency_report(
    graph: ProjectDependencyGraph,
    output_path: Path,
    *,
    reverse: bool = False,
    dense: bool = False,
    indent: int = 2,
) -> None:
    """Write the dependency trees of all projects to a JSON file.

    The output lists projects sorted by label. The dense form is a single
    mapping from project name to its nested children mapping.
    """
    logger.info("Exporting %s dependency report to JSON: %s",
                "reverse" if reverse else "forward", output_path)

    report = make_dependent_of_report(graph) if reverse else make_depends_on_report(graph)
    trees = sorted(report.values(), key=lambda tree: tree.name.casefold())

    data: Any
    if dense:
        data = {}
        for tree in trees:
            data.update(tree.dense_representation())
    else:
        key = "dependentOf" if reverse else "dependsOn"
        data = [tree.to_dict(key) for tree in trees]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

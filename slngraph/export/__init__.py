"""Renderers built on the graph query API."""

from .dot import build_dot_graph, export_dot
from .json import export_json
from .report import (
    DependencyTreeNode,
    export_dependency_report,
    make_dependent_of_report,
    make_depends_on_report,
)
from .summary import ProjectSummary, build_project_summaries, export_summaries
from .tree import NestingTooDeepError, SolutionTreeNode, build_solution_tree, export_solution_tree

__all__ = [
    "DependencyTreeNode",
    "NestingTooDeepError",
    "ProjectSummary",
    "SolutionTreeNode",
    "build_dot_graph",
    "build_project_summaries",
    "build_solution_tree",
    "export_dependency_report",
    "export_dot",
    "export_json",
    "export_solution_tree",
    "export_summaries",
    "make_dependent_of_report",
    "make_depends_on_report",
]

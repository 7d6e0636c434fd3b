"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
from typing import Tuple

from pydantic import ValidationError

from slngraph.config import ReportConfig, load_report_config
from slngraph.graph import GraphError, ProjectDependencyGraph
from slngraph.parsers import ParseError, Solution, load_solution

logger = logging.getLogger("slngraph.cli.common")

# Failures a command reports and turns into a non-zero exit code.
COMMAND_ERRORS = (GraphError, ParseError, ValidationError, OSError, ValueError, TypeError)


def load_config(args) -> ReportConfig:
    """Load the report configuration named by `--config`, if any."""
    return load_report_config(getattr(args, "config", None))


def load_graph(solution_path: str, config: ReportConfig) -> Tuple[Solution, ProjectDependencyGraph]:
    """Parse a solution and build its dependency graph.

    Unresolved references are reported as warnings. Singleton stubs are
    stripped when the configuration asks for it.
    """
    solution = load_solution(solution_path)
    graph = ProjectDependencyGraph(solution.records)

    unresolved = graph.unresolved_references
    for entry in unresolved:
        logger.warning(
            "%s references unknown project '%s'", entry.source, entry.reference.name
        )
    if unresolved:
        logger.warning("%d unresolved project reference(s)", len(unresolved))

    if config.strip_stubs:
        graph.strip_singleton_stubs()
    return solution, graph

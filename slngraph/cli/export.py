"""CLI commands that render a solution's dependency graph to files."""

from __future__ import annotations

import logging
from pathlib import Path

from slngraph.export import (
    export_dependency_report,
    export_dot,
    export_json,
    export_solution_tree,
    export_summaries,
)

from .common import COMMAND_ERRORS, load_config, load_graph

logger = logging.getLogger("slngraph.cli.export")


def export_command(args) -> int:
    """Execute one of the file export commands.

    Args:
        args: Parsed command-line arguments. `args.command` selects the
            output kind (summary, deps, tree, dot, graph).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        config = load_config(args)
        output_path = Path(args.output).expanduser()
        solution, graph = load_graph(args.solution, config)

        command = args.command
        if command == "summary":
            export_summaries(graph, output_path, indent=config.indent)
        elif command == "deps":
            export_dependency_report(
                graph,
                output_path,
                reverse=getattr(args, "reverse", False),
                dense=getattr(args, "dense", False),
                indent=config.indent,
            )
        elif command == "tree":
            export_solution_tree(solution.info, output_path, indent=config.indent)
        elif command == "dot":
            dot_config = config.dot
            if getattr(args, "reduced", False):
                dot_config = dot_config.model_copy(update={"reduced": True})
            export_dot(graph, output_path, dot_config)
        elif command == "graph":
            export_json(graph, output_path, indent=config.indent)
        else:
            logger.error("Unknown export command: %s", command)
            return 1

        logger.info("Wrote %s output for %s to %s", command, solution.name, output_path)
        return 0

    except COMMAND_ERRORS as e:
        logger.error("%s command failed: %s", args.command, e)
        return 1

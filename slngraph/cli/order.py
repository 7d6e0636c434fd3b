"""CLI command printing the build order of a solution.

Projects are listed so that every project comes after all projects it
depends on. When the graph contains cycles, each cycle is reported; with
`--fail-on-cycle` the command then exits non-zero so CI pipelines can
enforce acyclicity.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from slngraph.graph import CyclicGraphError

from .common import COMMAND_ERRORS, load_config, load_graph

logger = logging.getLogger("slngraph.cli.order")


def order_command(args, console: Optional[Console] = None) -> int:
    """Execute the build order command.

    Args:
        args: Parsed command-line arguments.
        console: Rich console to print to (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    fail_on_cycle = getattr(args, "fail_on_cycle", False)

    try:
        config = load_config(args)
        solution, graph = load_graph(args.solution, config)

        try:
            ordered = graph.topologically_sorted
        except CyclicGraphError as exc:
            logger.warning("%s", exc)
            for idx, members in enumerate(graph.find_cycles(), start=1):
                logger.warning("Cycle %d: %s", idx, " <-> ".join(members))
            if fail_on_cycle:
                logger.error(
                    "Build order validation failed: dependency cycles detected "
                    "(drop --fail-on-cycle to ignore)."
                )
                return 1
            return 0

        levels = graph.get_leaf_levels()
        table = Table(title=f"Build order: {solution.name}")
        table.add_column("#", justify="right")
        table.add_column("Project")
        table.add_column("Level", justify="right")
        table.add_column("Role")
        for node in ordered:
            role = []
            if node.is_root:
                role.append("root")
            if node.is_leaf:
                role.append("leaf")
            if node.is_stub:
                role.append("stub")
            table.add_row(
                str(node.topo_order),
                node.label,
                str(node.lookup(levels, 0)),
                ", ".join(role),
            )
        console.print(table)
        return 0

    except COMMAND_ERRORS as e:
        logger.error("Order command failed: %s", e)
        return 1

"""Main CLI entry point for slngraph.

Provides commands: summary, deps, tree, dot, graph, order
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from slngraph.cli.export import export_command
from slngraph.cli.order import order_command

logger = logging.getLogger("slngraph.cli")

EXPORT_COMMANDS = ("summary", "deps", "tree", "dot", "graph")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_solution_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "solution",
        help="Path to the solution (.sln) file",
    )


def _add_output_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help=help_text,
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="slngraph",
        description="slngraph - Solution Project Dependency Analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional report configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    summary_parser = subparsers.add_parser(
        "summary",
        help="Write JSON project summaries in build order",
    )
    _add_solution_argument(summary_parser)
    _add_output_argument(summary_parser, "Output JSON file")

    deps_parser = subparsers.add_parser(
        "deps",
        help="Write per-project dependency trees",
    )
    _add_solution_argument(deps_parser)
    _add_output_argument(deps_parser, "Output JSON file")
    deps_parser.add_argument(
        "--reverse",
        action="store_true",
        help="List dependents instead of dependencies",
    )
    deps_parser.add_argument(
        "--dense",
        action="store_true",
        help="Use the compact nested-mapping representation",
    )

    tree_parser = subparsers.add_parser(
        "tree",
        help="Write the solution folder tree",
    )
    _add_solution_argument(tree_parser)
    _add_output_argument(tree_parser, "Output JSON file")

    dot_parser = subparsers.add_parser(
        "dot",
        help="Export the dependency graph in GraphViz DOT format",
    )
    _add_solution_argument(dot_parser)
    _add_output_argument(dot_parser, "Output .dot file")
    dot_parser.add_argument(
        "--reduced",
        action="store_true",
        help="Only draw pure (non-redundant) dependency edges",
    )

    graph_parser = subparsers.add_parser(
        "graph",
        help="Export the dependency graph as node-link JSON",
    )
    _add_solution_argument(graph_parser)
    _add_output_argument(graph_parser, "Output JSON file")

    order_parser = subparsers.add_parser(
        "order",
        help="Print the build order and check for dependency cycles",
    )
    _add_solution_argument(order_parser)
    order_parser.add_argument(
        "--fail-on-cycle",
        action="store_true",
        help=(
            "Exit with non-zero status when dependency cycles are found. "
            "Useful for CI validation."
        ),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command in EXPORT_COMMANDS:
        return export_command(args)
    elif args.command == "order":
        return order_command(args)
    else:
        parser.print_help()
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()

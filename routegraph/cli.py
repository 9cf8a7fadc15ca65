"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from routegraph.algorithms.base import PathCondition
from routegraph.graph.edge import NodeID
from routegraph.graph.weighted_digraph import WeightedDiGraph
from routegraph.io import load_graph
from routegraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)

_CONDITIONS = {
    "at-most": PathCondition.AT_MOST_HOPS,
    "exact": PathCondition.EXACT_HOPS,
    "cost": PathCondition.COST_BOUNDED,
}


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 6) -> str:
    """Format rows as a simple ASCII table."""
    if not rows:
        return ""

    col_widths = [
        max(min_width, len(headers[idx]), *(len(row[idx]) for row in rows))
        for idx in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _inspect_graph(graph: WeightedDiGraph) -> None:
    print(f"Vertices: {graph.vertex_count()}")
    print(f"Edges: {graph.edge_count()}")
    rows = [
        [str(node_id), str(edge.terminal), str(edge.weight)]
        for node_id in graph.nodes
        for edge in graph.edges_of(node_id)
    ]
    if rows:
        print(_format_table(["Source", "Target", "Weight"], rows))


def _resolve_vertex(graph: WeightedDiGraph, name: str) -> NodeID:
    """Map a command-line vertex name to the graph key it spells.

    YAML may load vertex keys as ints, floats or bools; arguments always
    arrive as strings. Unknown names are returned unchanged so the query
    reports them as missing vertices.
    """
    if name in graph:
        return name
    by_name = {str(node_id): node_id for node_id in graph.nodes}
    return by_name.get(name, name)


def _run_command(args: argparse.Namespace) -> None:
    logger.info("Loading graph from %s", args.graph)
    graph = load_graph(args.graph)

    if args.command == "inspect":
        _inspect_graph(graph)
    elif args.command == "cost":
        print(graph.cost([_resolve_vertex(graph, name) for name in args.vertices]))
    elif args.command == "shortest":
        print(
            graph.shortest_path(
                _resolve_vertex(graph, args.start),
                _resolve_vertex(graph, args.destination),
            )
        )
    elif args.command == "paths":
        print(
            graph.paths_to(
                _resolve_vertex(graph, args.start),
                _resolve_vertex(graph, args.destination),
                args.limit,
                _CONDITIONS[args.condition],
            )
        )
    elif args.command == "reach":
        reached = graph.do_traversal(_resolve_vertex(graph, args.start))
        # Report in vertex order rather than set order
        print(" ".join(str(node_id) for node_id in graph.nodes if node_id in reached))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.

    Raises:
        SystemExit: With status 1 when the graph file or query is invalid.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Query routes in a directed weighted graph file.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,cost,shortest,paths,reach}",
        help="Available commands",
    )

    # Every command reads a graph file given first
    graph_parent = argparse.ArgumentParser(add_help=False)
    graph_parent.add_argument("graph", type=Path, help="Path to graph YAML/JSON")

    subparsers.add_parser(
        "inspect", parents=[graph_parent], help="Show vertices and edges"
    )

    cost_parser = subparsers.add_parser(
        "cost", parents=[graph_parent], help="Cost of an explicit path"
    )
    cost_parser.add_argument("vertices", nargs="+", help="Vertices along the path")

    shortest_parser = subparsers.add_parser(
        "shortest", parents=[graph_parent], help="Shortest distance between two vertices"
    )
    shortest_parser.add_argument("start")
    shortest_parser.add_argument("destination")

    paths_parser = subparsers.add_parser(
        "paths", parents=[graph_parent], help="Count walks between two vertices"
    )
    paths_parser.add_argument("start")
    paths_parser.add_argument("destination")
    paths_parser.add_argument(
        "--limit", "-l", type=int, required=True, help="Hop limit or cost limit"
    )
    paths_parser.add_argument(
        "--condition",
        "-c",
        choices=sorted(_CONDITIONS),
        default="at-most",
        help="How --limit bounds a walk (default: at-most)",
    )

    reach_parser = subparsers.add_parser(
        "reach", parents=[graph_parent], help="Vertices reachable from a vertex"
    )
    reach_parser.add_argument("start")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        _run_command(args)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()

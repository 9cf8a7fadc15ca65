"""routegraph: directed weighted graphs with routing queries.

routegraph provides an adjacency-list graph over arbitrary hashable vertex
keys and integer edge weights, with four query algorithms: explicit path cost,
Dijkstra shortest distance, bounded walk counting, and depth-first
reachability.

Primary API:
    WeightedDiGraph - The graph (a strict ``networkx.DiGraph`` subclass)
    EdgeRecord - Immutable (terminal, weight) outgoing edge
    PathCondition - Bound applied by walk counting
    load_graph() - Read a graph from a YAML/JSON file

Example:
    from routegraph import PathCondition, WeightedDiGraph

    g = WeightedDiGraph()
    for v in "ABC":
        g.add_vertex(v)
    g.set_edge("A", "B", 5)
    g.set_edge("B", "C", 4)

    g.cost(["A", "B", "C"])                             # 9
    g.shortest_path("A", "C")                           # 9
    g.paths_to("A", "C", 2, PathCondition.EXACT_HOPS)   # 1
"""

from __future__ import annotations

from routegraph import cli, logging
from routegraph._version import __version__
from routegraph.algorithms import (
    INF_COST,
    PathCondition,
    cost_between_neighbors,
    cost_of_path,
    count_paths,
    count_paths_at_most_hops,
    count_paths_cost_bounded,
    count_paths_exact_hops,
    dfs,
    dijkstra,
    shortest_path,
    traverse,
)
from routegraph.config import GRAPH_CONFIG, GraphConfig
from routegraph.errors import (
    ConcurrentMutation,
    DuplicateEdge,
    GraphError,
    NoMoreNeighbors,
    NoSuchEdge,
    NoSuchPath,
    NoSuchVertex,
    PathTooShort,
)
from routegraph.graph import EdgeRecord, WeightedDiGraph, WeightedEdge
from routegraph.io import graph_from_dict, graph_to_node_link, load_graph, node_link_to_graph

__all__ = [
    # Version
    "__version__",
    # Graph
    "WeightedDiGraph",
    "EdgeRecord",
    "WeightedEdge",
    # Algorithms
    "PathCondition",
    "INF_COST",
    "cost_between_neighbors",
    "cost_of_path",
    "count_paths",
    "count_paths_at_most_hops",
    "count_paths_exact_hops",
    "count_paths_cost_bounded",
    "dfs",
    "traverse",
    "dijkstra",
    "shortest_path",
    # Errors
    "GraphError",
    "NoSuchVertex",
    "NoSuchEdge",
    "DuplicateEdge",
    "PathTooShort",
    "NoSuchPath",
    "NoMoreNeighbors",
    "ConcurrentMutation",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # I/O
    "load_graph",
    "graph_from_dict",
    "graph_to_node_link",
    "node_link_to_graph",
    # Utilities
    "cli",
    "logging",
]

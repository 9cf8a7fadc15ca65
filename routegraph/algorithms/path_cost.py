"""Cost of direct edges and of explicit vertex sequences."""

from __future__ import annotations

from typing import Sequence

from routegraph.errors import NoSuchEdge, NoSuchVertex, PathTooShort
from routegraph.graph.edge import NodeID, Weight
from routegraph.graph.weighted_digraph import WEIGHT_ATTR, WeightedDiGraph


def cost_between_neighbors(
    graph: WeightedDiGraph, start: NodeID, destination: NodeID
) -> Weight:
    """Return the weight of the edge ``start -> destination``.

    Args:
        graph: Graph to read.
        start: Vertex the edge leaves from.
        destination: Vertex the edge points to. It does not need to be a
            vertex of the graph; if it is not, there is simply no such edge.

    Returns:
        The edge weight.

    Raises:
        NoSuchVertex: If ``start`` is not in the graph.
        NoSuchEdge: If ``destination`` is not a direct neighbor of ``start``.
    """
    outgoing_adjacencies = graph._succ  # type: ignore[attr-defined]
    if start not in outgoing_adjacencies:
        raise NoSuchVertex(f"Vertex '{start}' does not exist.")
    edge_attr = outgoing_adjacencies[start].get(destination)
    if edge_attr is None:
        raise NoSuchEdge(f"'{destination}' is not a neighbor of '{start}'.")
    return edge_attr[WEIGHT_ATTR]


def cost_of_path(graph: WeightedDiGraph, path: Sequence[NodeID]) -> Weight:
    """Return the total cost of walking ``path`` edge by edge.

    Args:
        graph: Graph to read.
        path: Vertex sequence; consecutive vertices must be joined by an edge.

    Returns:
        Sum of the edge weights along the path.

    Raises:
        PathTooShort: If ``path`` has fewer than two vertices.
        NoSuchVertex: If the first vertex of a hop is not in the graph.
        NoSuchEdge: If any hop has no direct edge.
    """
    if len(path) < 2:
        raise PathTooShort(f"Path {list(path)} is too short; need two vertices.")

    total = 0
    for src_node, dst_node in zip(path, path[1:]):
        try:
            total += cost_between_neighbors(graph, src_node, dst_node)
        except NoSuchEdge as exc:
            raise NoSuchEdge(
                f"No such path {list(path)}: no edge '{src_node}' -> '{dst_node}'."
            ) from exc
    return total

"""Depth-first reachability."""

from __future__ import annotations

from typing import Iterator, List, Optional, Set

from routegraph.errors import NoSuchVertex
from routegraph.graph.edge import NodeID
from routegraph.graph.weighted_digraph import WeightedDiGraph


def dfs(
    graph: WeightedDiGraph,
    start: NodeID,
    visited: Optional[Set[NodeID]] = None,
) -> Set[NodeID]:
    """Pre-order depth-first search.

    A vertex is marked before any of its neighbors is explored, and neighbors
    are explored in stored edge order. Already marked vertices are skipped,
    which also guarantees termination on cyclic graphs. The search keeps an
    explicit stack, so path length is not bounded by the recursion limit.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        visited: Set to mark vertices in. Updated in place when given;
            vertices already in it are treated as visited.

    Returns:
        The visited set.

    Raises:
        NoSuchVertex: If ``start`` is not in the graph.
    """
    outgoing_adjacencies = graph._succ  # type: ignore[attr-defined]
    if start not in outgoing_adjacencies:
        raise NoSuchVertex(f"Vertex '{start}' does not exist.")
    if visited is None:
        visited = set()

    # One neighbor iterator per vertex on the current branch
    visited.add(start)
    stack: List[Iterator[NodeID]] = [iter(outgoing_adjacencies[start])]
    while stack:
        for neighbor_id in stack[-1]:
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                stack.append(iter(outgoing_adjacencies[neighbor_id]))
                break
        else:
            stack.pop()
    return visited


def traverse(graph: WeightedDiGraph, start: NodeID) -> Set[NodeID]:
    """Return the set of vertices reachable from ``start`` (start included)."""
    return dfs(graph, start, set())

"""Shortest-path-first (SPF) distances.

Implements the classic array/set form of Dijkstra over the graph's vertex
mapping: an O(V^2) selection scan instead of a priority queue, so that tie
breaking is fully determined by vertex order.

Notes:
    - The start vertex is marked visited up front but its own distance starts
      at infinity (or the weight of a self-loop). ``shortest_path(v, v)`` is
      therefore the cost of the cheapest cycle through ``v``, not zero.
    - When several unvisited vertices share the minimal distance, the first
      one in vertex insertion order is selected.
    - Negative edge weights are accepted but results are undefined.
"""

from __future__ import annotations

from typing import Dict, Optional, Set, Tuple

from routegraph.algorithms.base import INF_COST, Cost
from routegraph.algorithms.path_cost import cost_between_neighbors
from routegraph.errors import NoSuchPath, NoSuchVertex
from routegraph.graph.edge import NodeID
from routegraph.graph.weighted_digraph import WeightedDiGraph
from routegraph.logging import get_logger

logger = get_logger(__name__)


def dijkstra(
    graph: WeightedDiGraph,
    start: NodeID,
    visited: Optional[Set[NodeID]] = None,
) -> Tuple[Dict[NodeID, Cost], Set[NodeID]]:
    """Compute the minimal cost from ``start`` to every vertex.

    Args:
        graph: Graph to read.
        start: Source vertex.
        visited: Set to record settled vertices in. It is cleared first;
            a fresh set is used when omitted.

    Returns:
        A tuple of (distances, visited):
          - distances: Every vertex mapped to its minimal cost from ``start``,
            or ``INF_COST`` if unreachable. Keys follow vertex order.
          - visited: Vertices settled during the search, ``start`` included.

    Raises:
        NoSuchVertex: If ``start`` is not in the graph.
    """
    outgoing_adjacencies = graph._succ  # type: ignore[attr-defined]
    if start not in outgoing_adjacencies:
        raise NoSuchVertex(f"Vertex '{start}' does not exist.")

    if visited is None:
        visited = set()
    visited.clear()

    distances: Dict[NodeID, Cost] = {node_id: INF_COST for node_id in outgoing_adjacencies}
    for neighbor_id in outgoing_adjacencies[start]:
        distances[neighbor_id] = cost_between_neighbors(graph, start, neighbor_id)
    visited.add(start)

    for _ in range(len(outgoing_adjacencies)):
        # Select the closest unvisited vertex; strict '<' keeps the first on ties
        closest: Optional[NodeID] = None
        min_cost: Cost = INF_COST
        for node_id, node_cost in distances.items():
            if node_id not in visited and node_cost < min_cost:
                closest = node_id
                min_cost = node_cost

        # Everything left is unreachable; further rounds cannot change distances
        if closest is None:
            break

        visited.add(closest)

        # Relax outgoing edges of the newly settled vertex
        for neighbor_id in outgoing_adjacencies[closest]:
            new_cost = min_cost + cost_between_neighbors(graph, closest, neighbor_id)
            if new_cost < distances[neighbor_id]:
                distances[neighbor_id] = new_cost

    return distances, visited


def shortest_path(
    graph: WeightedDiGraph,
    start: NodeID,
    destination: NodeID,
    visited: Optional[Set[NodeID]] = None,
) -> int:
    """Return the minimal cost of a walk from ``start`` to ``destination``.

    ``start == destination`` is not special-cased: the result is the cost of
    the cheapest cycle through the vertex.

    Args:
        graph: Graph to read.
        start: Source vertex.
        destination: Target vertex.
        visited: Optional set that receives the vertices settled by the search.

    Returns:
        The minimal cost.

    Raises:
        NoSuchVertex: If start or destination is not in the graph.
        NoSuchPath: If destination is unreachable from start.
    """
    if start not in graph or destination not in graph:
        raise NoSuchVertex(
            f"Vertex '{start}' or '{destination}' does not exist in the graph."
        )

    distances, visited = dijkstra(graph, start, visited)
    result = distances[destination]
    logger.debug(
        "SPF %s -> %s: cost %s, %d vertices settled",
        start,
        destination,
        result,
        len(visited),
    )
    if result == INF_COST:
        raise NoSuchPath(f"No path from '{start}' to '{destination}'.")
    return result

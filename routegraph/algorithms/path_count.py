"""Bounded walk counting between two vertices.

All counters enumerate walks recursively: vertices and edges may repeat, so
cycles are followed until the hop or cost budget runs out. A caller's limit
``L`` becomes the internal budget ``L - 1`` before the first recursion step.

Notes:
    Each recursion level iterates its own snapshot of a vertex's edge list.
    If the graph changes structurally while a count is running (detected via
    ``WeightedDiGraph.mutation_count`` or an edge whose weight can no longer
    be looked up), `ConcurrentMutation` is raised instead of returning a
    wrong answer.
"""

from __future__ import annotations

from typing import Callable, List, Union

from routegraph.algorithms.base import PathCondition
from routegraph.algorithms.path_cost import cost_between_neighbors
from routegraph.config import GRAPH_CONFIG
from routegraph.errors import ConcurrentMutation, NoSuchEdge, NoSuchVertex
from routegraph.graph.edge import NodeID, Weight, WeightedEdge
from routegraph.graph.weighted_digraph import WeightedDiGraph
from routegraph.logging import get_logger

logger = get_logger(__name__)

EdgeReader = Callable[[NodeID], List[WeightedEdge]]


def _check_endpoints(graph: WeightedDiGraph, start: NodeID, destination: NodeID) -> None:
    if start not in graph or destination not in graph:
        raise NoSuchVertex(
            f"Vertex '{start}' or '{destination}' does not exist in the graph."
        )


def _edge_reader(graph: WeightedDiGraph) -> EdgeReader:
    """Return a reader of edge snapshots bound to the graph's current state."""
    expected = graph.mutation_count

    def read(node_id: NodeID) -> List[WeightedEdge]:
        if graph.mutation_count != expected:
            raise ConcurrentMutation(
                f"{type(graph).__name__} changed while walks were being counted."
            )
        try:
            return graph.edges_of(node_id)
        except NoSuchVertex as exc:
            raise ConcurrentMutation(
                f"Vertex '{node_id}' vanished while walks were being counted."
            ) from exc

    return read


def _count_at_most_hops(
    read: EdgeReader, node_id: NodeID, destination: NodeID, budget: int
) -> int:
    count = 0
    for edge in read(node_id):
        if budget < 0:
            break
        if edge.terminal == destination:
            count += 1
        elif read(edge.terminal):
            count += _count_at_most_hops(read, edge.terminal, destination, budget - 1)
    return count


def _count_exact_hops(
    read: EdgeReader, node_id: NodeID, destination: NodeID, budget: int
) -> int:
    count = 0
    for edge in read(node_id):
        if budget < 0:
            break
        if budget == 0 and edge.terminal == destination:
            count += 1
        # Destination reached too early: keep walking through it
        elif read(edge.terminal):
            count += _count_exact_hops(read, edge.terminal, destination, budget - 1)
    return count


def _count_cost_bounded(
    graph: WeightedDiGraph,
    read: EdgeReader,
    node_id: NodeID,
    destination: NodeID,
    budget: int,
) -> int:
    count = 0
    for edge in read(node_id):
        if budget < 0:
            break
        try:
            weight = cost_between_neighbors(graph, node_id, edge.terminal)
        except (NoSuchEdge, NoSuchVertex) as exc:
            raise ConcurrentMutation(
                f"Edge '{node_id}' -> '{edge.terminal}' deleted while walks "
                "were being counted."
            ) from exc

        if edge.terminal == destination:
            if budget - weight < 0:
                continue
            count += 1

        # Counting a walk that ends here does not stop walks that pass through
        if read(edge.terminal):
            count += _count_cost_bounded(
                graph, read, edge.terminal, destination, budget - weight
            )
    return count


def count_paths_at_most_hops(
    graph: WeightedDiGraph, start: NodeID, destination: NodeID, limit: int
) -> int:
    """Count walks from start to destination with at most ``limit`` hops.

    A walk stops the first time it reaches ``destination``.

    Args:
        graph: Graph to read.
        start: First vertex of every walk.
        destination: Last vertex of every walk.
        limit: Maximum number of hops.

    Returns:
        Number of distinct walks.

    Raises:
        NoSuchVertex: If start or destination is not in the graph.
        ConcurrentMutation: If the graph changes during the count.
    """
    _check_endpoints(graph, start, destination)
    GRAPH_CONFIG.check_enumeration_budget(limit)
    count = _count_at_most_hops(_edge_reader(graph), start, destination, limit - 1)
    logger.debug(
        "Walks %s -> %s with at most %d hops: %d", start, destination, limit, count
    )
    return count


def count_paths_exact_hops(
    graph: WeightedDiGraph, start: NodeID, destination: NodeID, limit: int
) -> int:
    """Count walks from start to destination with exactly ``limit`` hops.

    Walks may pass through ``destination`` before their last hop.

    Raises:
        NoSuchVertex: If start or destination is not in the graph.
        ConcurrentMutation: If the graph changes during the count.
    """
    _check_endpoints(graph, start, destination)
    GRAPH_CONFIG.check_enumeration_budget(limit)
    count = _count_exact_hops(_edge_reader(graph), start, destination, limit - 1)
    logger.debug(
        "Walks %s -> %s with exactly %d hops: %d", start, destination, limit, count
    )
    return count


def count_paths_cost_bounded(
    graph: WeightedDiGraph, start: NodeID, destination: NodeID, cost_limit: Weight
) -> int:
    """Count walks from start to destination costing strictly less than ``cost_limit``.

    Unlike the hop-bounded counters, a walk that reaches ``destination`` is
    counted and may also continue through it, so longer walks that come back
    to ``destination`` are counted too.

    Raises:
        NoSuchVertex: If start or destination is not in the graph.
        ConcurrentMutation: If the graph changes during the count.
    """
    _check_endpoints(graph, start, destination)
    GRAPH_CONFIG.check_enumeration_budget(cost_limit)
    count = _count_cost_bounded(
        graph, _edge_reader(graph), start, destination, cost_limit - 1
    )
    logger.debug(
        "Walks %s -> %s cheaper than %d: %d", start, destination, cost_limit, count
    )
    return count


def count_paths(
    graph: WeightedDiGraph,
    start: NodeID,
    destination: NodeID,
    limit: int,
    condition: Union[PathCondition, int] = PathCondition.AT_MOST_HOPS,
) -> int:
    """Count walks from start to destination under a bounding condition.

    Args:
        graph: Graph to read.
        start: First vertex of every walk.
        destination: Last vertex of every walk.
        limit: Hop limit, or cost limit for ``PathCondition.COST_BOUNDED``.
        condition: Which bound ``limit`` applies to.

    Returns:
        Number of distinct walks.

    Raises:
        ValueError: If ``condition`` is not a `PathCondition`.
    """
    condition = PathCondition(condition)
    if condition == PathCondition.AT_MOST_HOPS:
        return count_paths_at_most_hops(graph, start, destination, limit)
    if condition == PathCondition.EXACT_HOPS:
        return count_paths_exact_hops(graph, start, destination, limit)
    return count_paths_cost_bounded(graph, start, destination, limit)

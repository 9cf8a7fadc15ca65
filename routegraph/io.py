"""Reading and writing graphs as plain data.

Two document shapes are supported:

- node-link, as produced by `graph_to_node_link` (compatible with the format
  used by NetworkX and D3.js)::

    {"graph": {...},
     "nodes": [{"id": "A"}, ...],
     "links": [{"source": 0, "target": 1, "weight": 5}, ...]}

- a hand-written edge list, convenient in YAML files::

    vertices: [A, B, C]
    edges:
      - {source: A, target: B, weight: 5}
      - [B, C, 4]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from routegraph.graph.edge import NodeID, Weight
from routegraph.graph.weighted_digraph import WeightedDiGraph
from routegraph.logging import get_logger

logger = get_logger(__name__)


def graph_to_node_link(graph: WeightedDiGraph) -> Dict[str, Any]:
    """Return a node-link representation suitable for JSON serialization.

    Links are listed vertex by vertex in stored edge order, so rebuilding the
    graph with `node_link_to_graph` preserves neighbor order.
    """
    node_map = {node_id: num for num, node_id in enumerate(graph.nodes)}

    return {
        "graph": {**graph.graph},
        "nodes": [{"id": node_id} for node_id in node_map],
        "links": [
            {
                "source": node_map[node_id],
                "target": node_map[edge.terminal],
                "weight": edge.weight,
            }
            for node_id in node_map
            for edge in graph.edges_of(node_id)
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> WeightedDiGraph:
    """Build a WeightedDiGraph from a node-link dictionary."""
    node_map: Dict[int, NodeID] = {}
    graph = WeightedDiGraph(**data.get("graph", {}))

    for node_n, node in enumerate(data["nodes"]):
        graph.add_vertex(node["id"])
        node_map[node_n] = node["id"]

    for link in data["links"]:
        graph.set_edge(
            node_map[link["source"]],
            node_map[link["target"]],
            _check_weight(link.get("weight", 1)),
        )
    return graph


def _check_weight(weight: Any) -> Weight:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an integer, got {weight!r}.")
    return weight


def _parse_edge(entry: Any) -> Tuple[NodeID, NodeID, Weight]:
    if isinstance(entry, dict):
        if "source" not in entry or "target" not in entry:
            raise ValueError("Each edge mapping must include 'source' and 'target'.")
        return entry["source"], entry["target"], _check_weight(entry.get("weight", 1))
    if isinstance(entry, (list, tuple)) and len(entry) == 3:
        source, target, weight = entry
        return source, target, _check_weight(weight)
    raise ValueError(
        f"Edge definition {entry!r} must be a mapping or a [source, target, weight] list."
    )


def graph_from_dict(data: Dict[str, Any]) -> WeightedDiGraph:
    """Build a WeightedDiGraph from a ``vertices`` / ``edges`` document.

    Vertices named only by edges are added in the order they are first seen,
    after the explicitly listed ones.

    Raises:
        ValueError: If the document is malformed.
    """
    vertices = data.get("vertices") or []
    edges = data.get("edges") or []
    if not isinstance(vertices, list):
        raise ValueError("'vertices' must be a list")
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    parsed: List[Tuple[NodeID, NodeID, Weight]] = [_parse_edge(e) for e in edges]

    graph = WeightedDiGraph()
    for vertex in vertices:
        if vertex in graph:
            raise ValueError(f"Vertex '{vertex}' is listed more than once.")
        graph.add_vertex(vertex)
    for source, target, _ in parsed:
        for endpoint in (source, target):
            if endpoint not in graph:
                graph.add_vertex(endpoint)
    for source, target, weight in parsed:
        graph.set_edge(source, target, weight)

    logger.debug(
        "Built graph with %d vertices and %d edges",
        graph.vertex_count(),
        graph.edge_count(),
    )
    return graph


def load_graph(path: Union[str, Path]) -> WeightedDiGraph:
    """Load a graph from a YAML or JSON file.

    Documents with a ``links`` key are read as node-link data, anything else
    as a ``vertices`` / ``edges`` document.

    Raises:
        ValueError: If the file does not hold a mapping or is malformed.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided graph file must map to a dictionary at top-level.")

    if "links" in data:
        return node_link_to_graph(data)
    return graph_from_dict(data)

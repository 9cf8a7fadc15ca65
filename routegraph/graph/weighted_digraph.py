"""Directed, integer-weighted graph with strict validation.

`WeightedDiGraph` extends `networkx.DiGraph` with the adjacency-list graph ADT
used by the routing algorithms: ordered outgoing-edge sequences, first/next
neighbor iteration, a visited-set ("mark") record, and named failures instead
of silent auto-creation of vertices.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Optional,
    Sequence,
    Set,
)

import networkx as nx

from routegraph.config import GRAPH_CONFIG
from routegraph.errors import DuplicateEdge, NoMoreNeighbors, NoSuchEdge, NoSuchVertex
from routegraph.graph.edge import EdgeRecord, NodeID, Weight, WeightedEdge
from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.algorithms.base import PathCondition

logger = get_logger(__name__)

WEIGHT_ATTR = "weight"


class WeightedDiGraph(nx.DiGraph):
    """A directed graph whose edges carry a single integer weight.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - At most one edge per ordered (start, destination) pair.
      - Removing or querying an edge between unknown vertices raises
        `NoSuchVertex`; a missing edge raises `NoSuchEdge`.
      - The bulk mutators inherited from networkx (`add_nodes_from`,
        `add_edges_from`, `add_weighted_edges_from`, `update`, ...) go through
        the same checks and bump `mutation_count`.

    Outgoing edges are kept in insertion order. That order drives
    `first_neighbor` / `next_neighbor` and the order in which the
    enumeration algorithms explore a vertex's edges. Vertex order (used for
    shortest-path tie-breaks) is vertex insertion order.

    Caveat: `add_vertex` on an existing key discards that vertex's outgoing
    edges. Incoming edges from other vertices are kept.

    Inherits from:
        networkx.DiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize an empty WeightedDiGraph.

        Args:
            *args: Positional arguments forwarded to the DiGraph constructor.
            **kwargs: Keyword arguments forwarded to the DiGraph constructor.

        Attributes:
            _mark: Visited set of the latest traversal or shortest-path run.
            _mutation_count: Bumped by every structural change made through
                this API; read by enumeration to detect concurrent change.
        """
        self._mark: Set[NodeID] = set()
        self._mutation_count: int = 0
        super().__init__(*args, **kwargs)

    @property
    def mutation_count(self) -> int:
        """Number of structural changes made through this API so far."""
        return self._mutation_count

    def _require_vertex(self, key: NodeID) -> None:
        if key not in self._succ:
            raise NoSuchVertex(f"Vertex '{key}' does not exist.")

    #
    # Vertex management
    #
    def add_vertex(self, key: NodeID) -> None:
        """Add a vertex with no outgoing edges.

        If the vertex already exists its outgoing edges are dropped and it
        keeps its position in vertex order.

        Args:
            key: The vertex to add.
        """
        if key not in self._succ:
            super().add_node(key)
            return

        dropped = list(self._succ[key])
        for terminal in dropped:
            super().remove_edge(key, terminal)
        self._mutation_count += 1
        logger.debug(
            "Vertex '%s' re-added; discarded %d outgoing edge(s)", key, len(dropped)
        )

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single vertex with the same semantics as `add_vertex`.

        Node attributes are stored as in networkx.

        Args:
            node_for_adding: The vertex to add.
            **attr: Arbitrary attributes for this vertex.
        """
        self.add_vertex(node_for_adding)
        self._node[node_for_adding].update(attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """Add vertices one by one through `add_node`.

        Items may be vertex keys or ``(key, attr_dict)`` pairs.
        """
        for item in nodes_for_adding:
            try:
                hash(item)
                node_id, node_attr = item, attr
            except TypeError:
                node_id, extra = item
                node_attr = {**attr, **extra}
            self.add_node(node_id, **node_attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a vertex together with its outgoing and incoming edges.

        Raises:
            NoSuchVertex: If the vertex does not exist.
        """
        self._require_vertex(n)
        super().remove_node(n)
        self._mutation_count += 1
        logger.debug("Vertex '%s' removed", n)

    def remove_nodes_from(self, nodes: Iterable[NodeID]) -> None:
        """Remove each vertex through `remove_node`.

        Raises:
            NoSuchVertex: If any vertex does not exist.
        """
        for node_id in list(nodes):
            self.remove_node(node_id)

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._succ)

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_of_edge: NodeID,
        v_of_edge: NodeID,
        **attr: Any,
    ) -> None:
        """Add a directed edge from u_of_edge to v_of_edge.

        Unlike networkx, vertices are not created on demand and an existing
        edge is never updated in place. A missing ``weight`` attribute
        defaults to 1.

        Raises:
            NoSuchVertex: If either endpoint does not exist.
            DuplicateEdge: If the edge already exists.
        """
        self._require_vertex(u_of_edge)
        self._require_vertex(v_of_edge)
        if v_of_edge in self._succ[u_of_edge]:
            raise DuplicateEdge(
                f"Edge '{u_of_edge}' -> '{v_of_edge}' already exists."
            )

        weight = attr.setdefault(WEIGHT_ATTR, 1)
        if weight < 0 and GRAPH_CONFIG.warn_on_negative_weight:
            logger.warning(
                "Edge '%s' -> '%s' has negative weight %s; shortest paths are "
                "undefined for negative weights",
                u_of_edge,
                v_of_edge,
                weight,
            )

        super().add_edge(u_of_edge, v_of_edge, **attr)
        self._mutation_count += 1

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        """Add edges one by one through `add_edge`.

        Items are ``(u, v)`` or ``(u, v, attr_dict)`` tuples. The weighted
        and update helpers inherited from networkx funnel through here.

        Raises:
            NoSuchVertex: If an endpoint does not exist.
            DuplicateEdge: If an edge already exists.
        """
        for edge in ebunch_to_add:
            if len(edge) == 3:
                u, v, edge_attr = edge
            elif len(edge) == 2:
                u, v = edge
                edge_attr = {}
            else:
                raise nx.NetworkXError(f"Edge tuple {edge} must be a 2-tuple or 3-tuple.")
            self.add_edge(u, v, **{**attr, **edge_attr})

    def set_edge(self, start: NodeID, destination: NodeID, weight: Weight) -> None:
        """Append an edge ``start -> destination`` with the given weight.

        Raises:
            NoSuchVertex: If either vertex does not exist.
            DuplicateEdge: If the edge already exists.
        """
        self.add_edge(start, destination, **{WEIGHT_ATTR: weight})

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge from u to v, preserving the order of the others.

        Raises:
            NoSuchVertex: If either vertex does not exist.
            NoSuchEdge: If there is no edge from u to v.
        """
        self._require_vertex(u)
        self._require_vertex(v)
        if v not in self._succ[u]:
            raise NoSuchEdge(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)
        self._mutation_count += 1

    def remove_edges_from(self, ebunch: Iterable[Any]) -> None:
        """Remove each ``(u, v, ...)`` edge through `remove_edge`.

        Raises:
            NoSuchVertex: If an endpoint does not exist.
            NoSuchEdge: If an edge does not exist.
        """
        for edge in list(ebunch):
            self.remove_edge(edge[0], edge[1])

    def clear_edges(self) -> None:
        """Remove all edges, keeping the vertices."""
        super().clear_edges()
        self._mutation_count += 1

    def clear(self) -> None:
        """Remove all vertices, edges and marks."""
        super().clear()
        self._mark = set()
        self._mutation_count += 1

    def delete_edge(self, start: NodeID, destination: NodeID) -> None:
        """Alias of `remove_edge` using the graph ADT's vocabulary."""
        self.remove_edge(start, destination)

    def edges_of(self, key: NodeID) -> List[WeightedEdge]:
        """Return the outgoing edges of a vertex in insertion order.

        Each item is an `EdgeRecord`, which satisfies `WeightedEdge`.

        The list is built on each call, so iterating it is safe while the
        graph changes.

        Raises:
            NoSuchVertex: If the vertex does not exist.
        """
        self._require_vertex(key)
        return [
            EdgeRecord(terminal, attr[WEIGHT_ATTR])
            for terminal, attr in self._succ[key].items()
        ]

    def is_edge(self, start: NodeID, destination: NodeID) -> bool:
        """Check whether the edge ``start -> destination`` exists.

        Unlike networkx's ``has_edge``, unknown vertices are an error.

        Raises:
            NoSuchVertex: If either vertex does not exist.
        """
        self._require_vertex(start)
        self._require_vertex(destination)
        return destination in self._succ[start]

    def weight_of(self, start: NodeID, destination: NodeID) -> Weight:
        """Return the weight of the edge ``start -> destination``.

        Raises:
            NoSuchVertex: If either vertex does not exist.
            NoSuchEdge: If the edge does not exist.
        """
        if not self.is_edge(start, destination):
            raise NoSuchEdge(f"No edge from '{start}' to '{destination}'.")
        return self._succ[start][destination][WEIGHT_ATTR]

    def edge_count(self) -> int:
        """Return the total number of edges."""
        return sum(len(neighbors) for neighbors in self._succ.values())

    #
    # Neighbor iteration
    #
    def first_neighbor(self, key: NodeID) -> Optional[WeightedEdge]:
        """Return the first outgoing edge of a vertex, or None if it has none.

        Raises:
            NoSuchVertex: If the vertex does not exist.
        """
        edges = self.edges_of(key)
        return edges[0] if edges else None

    def next_neighbor(self, key: NodeID, after: NodeID) -> WeightedEdge:
        """Return the edge that follows the edge ``key -> after``.

        Raises:
            NoSuchVertex: If either vertex does not exist.
            NoSuchEdge: If ``after`` is not a neighbor of ``key``.
            NoMoreNeighbors: If ``key -> after`` is the last outgoing edge.
        """
        self._require_vertex(after)
        edges = self.edges_of(key)
        for idx, edge in enumerate(edges):
            if edge.terminal == after:
                if idx + 1 < len(edges):
                    return edges[idx + 1]
                raise NoMoreNeighbors(
                    f"No more neighbors of '{key}' after '{after}'."
                )
        raise NoSuchEdge(f"No edge from '{key}' to '{after}'.")

    #
    # Visited-set record
    #
    def set_mark(self, key: NodeID, value: int = 1) -> None:
        """Add a vertex to the visited set. ``value`` is ignored."""
        self._mark.add(key)

    def get_mark(self, key: NodeID) -> int:
        """Return 1 if the vertex is in the visited set, otherwise 0."""
        return 1 if key in self._mark else 0

    @property
    def visited(self) -> FrozenSet[NodeID]:
        """Vertices marked by the latest traversal or shortest-path run."""
        return frozenset(self._mark)

    #
    # Queries (thin wrappers around routegraph.algorithms)
    #
    def cost_neighbor(self, start: NodeID, destination: NodeID) -> Weight:
        """Cost of the direct edge ``start -> destination``."""
        from routegraph.algorithms.path_cost import cost_between_neighbors

        return cost_between_neighbors(self, start, destination)

    def cost(self, path: Sequence[NodeID]) -> Weight:
        """Total cost of an explicit vertex sequence."""
        from routegraph.algorithms.path_cost import cost_of_path

        return cost_of_path(self, path)

    def paths_to(
        self,
        start: NodeID,
        destination: NodeID,
        limit: int,
        condition: PathCondition,
    ) -> int:
        """Count walks from start to destination under a `PathCondition`."""
        from routegraph.algorithms.path_count import count_paths

        return count_paths(self, start, destination, limit, condition)

    def do_traversal(self, start: NodeID) -> Set[NodeID]:
        """Depth-first traversal from start; replaces the visited set."""
        from routegraph.algorithms.traversal import traverse

        self._mark = traverse(self, start)
        return self._mark

    def shortest_path(self, start: NodeID, destination: NodeID) -> Weight:
        """Minimum cost from start to destination; replaces the visited set."""
        from routegraph.algorithms.spf import shortest_path

        visited: Set[NodeID] = set()
        try:
            return shortest_path(self, start, destination, visited=visited)
        finally:
            # Vertex validation failures leave the previous record untouched
            if visited:
                self._mark = visited

    def to_dict(self) -> Dict[str, Any]:
        """Convert the graph to a node-link dictionary suitable for JSON.

        Returns:
            Dict[str, Any]: Dictionary containing 'graph', 'nodes', and 'links' keys.
        """
        # Import here to avoid circular import
        from routegraph.io import graph_to_node_link

        return graph_to_node_link(self)

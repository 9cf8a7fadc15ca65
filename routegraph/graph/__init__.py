"""Graph primitives.

This package provides the directed weighted graph type `WeightedDiGraph` and
the edge value types it hands out (`edge`).
"""

from routegraph.graph.edge import EdgeRecord, NodeID, Weight, WeightedEdge
from routegraph.graph.weighted_digraph import WeightedDiGraph

__all__ = ["EdgeRecord", "NodeID", "Weight", "WeightedDiGraph", "WeightedEdge"]

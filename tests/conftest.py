"""Shared sample graphs.

Both graphs are built through the public API so that vertex order and
per-vertex edge order follow insertion order, exactly as listed here.
"""

from __future__ import annotations

import pytest

from routegraph.graph.weighted_digraph import WeightedDiGraph


def _build(vertices, edges) -> WeightedDiGraph:
    g = WeightedDiGraph()
    for vertex in vertices:
        g.add_vertex(vertex)
    for start, destination, weight in edges:
        g.set_edge(start, destination, weight)
    return g


@pytest.fixture
def acyclic_graph() -> WeightedDiGraph:
    # Weights (no cycles):
    #   A ─[5]──► B    A ─[10]─► C
    #   B ─[4]──► C    B ─[5]──► E    B ─[10]─► D
    #   C ─[1]──► E
    #   D ─[1]──► F    D ─[2]──► E
    #   E ─[10]─► F
    return _build(
        "ABCDEF",
        [
            ("A", "B", 5),
            ("A", "C", 10),
            ("B", "C", 4),
            ("B", "E", 5),
            ("B", "D", 10),
            ("C", "E", 1),
            ("D", "F", 1),
            ("D", "E", 2),
            ("E", "F", 10),
        ],
    )


@pytest.fixture
def general_graph() -> WeightedDiGraph:
    # Weights (cycles C-D-C, B-C-E-B, B-C-D-E-B):
    #   A ─[5]──► B    A ─[5]──► D    A ─[7]──► E
    #   B ─[4]──► C
    #   C ─[7]──► D    C ─[2]──► E
    #   D ─[8]──► C    D ─[6]──► E
    #   E ─[3]──► B
    return _build(
        "ABCDE",
        [
            ("A", "B", 5),
            ("B", "C", 4),
            ("C", "D", 7),
            ("D", "C", 8),
            ("D", "E", 6),
            ("A", "D", 5),
            ("C", "E", 2),
            ("E", "B", 3),
            ("A", "E", 7),
        ],
    )

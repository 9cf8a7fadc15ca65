import pytest

from routegraph.algorithms.traversal import dfs, traverse
from routegraph.errors import NoSuchVertex
from routegraph.graph.weighted_digraph import WeightedDiGraph


def test_traverse_reaches_everything_from_root(acyclic_graph):
    assert traverse(acyclic_graph, "A") == set("ABCDEF")


def test_traverse_from_inner_vertex(acyclic_graph):
    assert traverse(acyclic_graph, "D") == {"D", "E", "F"}


def test_traverse_sink(acyclic_graph):
    assert traverse(acyclic_graph, "F") == {"F"}


def test_traverse_with_cycles(general_graph):
    assert traverse(general_graph, "E") == {"B", "C", "D", "E"}
    assert traverse(general_graph, "A") == set("ABCDE")


def test_traverse_unknown_vertex(acyclic_graph):
    with pytest.raises(NoSuchVertex):
        traverse(acyclic_graph, "Z")


def test_dfs_reuses_given_set(acyclic_graph):
    visited = {"E"}
    result = dfs(acyclic_graph, "D", visited)
    assert result is visited
    assert visited == {"D", "E", "F"}


def test_dfs_skips_already_visited(acyclic_graph):
    # E is pre-marked, so nothing behind it is explored
    assert dfs(acyclic_graph, "C", {"E"}) == {"C", "E"}


def test_dfs_preorder():
    g = WeightedDiGraph()
    for v in "ABCD":
        g.add_vertex(v)
    g.set_edge("A", "C", 1)
    g.set_edge("A", "B", 1)
    g.set_edge("C", "D", 1)
    g.set_edge("D", "A", 1)

    order = []

    class RecordingSet(set):
        def add(self, item):
            order.append(item)
            super().add(item)

    dfs(g, "A", RecordingSet())
    assert order == ["A", "C", "D", "B"]


def test_do_traversal_sets_marks(acyclic_graph):
    acyclic_graph.do_traversal("A")
    for vertex in "ABCDEF":
        assert acyclic_graph.get_mark(vertex) == 1

    acyclic_graph.do_traversal("D")
    for vertex in "ABC":
        assert acyclic_graph.get_mark(vertex) == 0
    for vertex in "DEF":
        assert acyclic_graph.get_mark(vertex) == 1


def test_traverse_long_chain():
    g = WeightedDiGraph()
    g.add_nodes_from(range(5000))
    for node in range(4999):
        g.set_edge(node, node + 1, 1)

    assert traverse(g, 0) == set(range(5000))
    assert traverse(g, 4000) == set(range(4000, 5000))

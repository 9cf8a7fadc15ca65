import json
from pathlib import Path

import pytest

from routegraph.graph.edge import EdgeRecord
from routegraph.io import (
    graph_from_dict,
    graph_to_node_link,
    load_graph,
    node_link_to_graph,
)

GENERAL_YAML = """\
vertices: [A, B, C, D, E]
edges:
  - {source: A, target: B, weight: 5}
  - [B, C, 4]
  - [C, D, 7]
  - [D, C, 8]
  - [D, E, 6]
  - [A, D, 5]
  - [C, E, 2]
  - [E, B, 3]
  - [A, E, 7]
"""


def test_graph_from_dict():
    g = graph_from_dict(
        {
            "vertices": ["A", "B"],
            "edges": [
                {"source": "A", "target": "B", "weight": 2},
                ["B", "C", 3],
            ],
        }
    )
    # C is added after the listed vertices
    assert list(g.nodes) == ["A", "B", "C"]
    assert g.edges_of("A") == [EdgeRecord("B", 2)]
    assert g.weight_of("B", "C") == 3


def test_graph_from_dict_default_weight():
    g = graph_from_dict({"edges": [{"source": "A", "target": "B"}]})
    assert g.weight_of("A", "B") == 1


def test_graph_from_dict_empty():
    g = graph_from_dict({})
    assert g.vertex_count() == 0


@pytest.mark.parametrize(
    "data,message",
    [
        ({"vertices": "A"}, "'vertices' must be a list"),
        ({"edges": {"A": "B"}}, "'edges' must be a list"),
        ({"edges": [{"source": "A"}]}, "must include 'source' and 'target'"),
        ({"edges": [["A", "B"]]}, "must be a mapping or a"),
        ({"edges": [["A", "B", 1.5]]}, "must be an integer"),
        ({"edges": [["A", "B", True]]}, "must be an integer"),
        ({"vertices": ["A", "A"]}, "listed more than once"),
    ],
)
def test_graph_from_dict_malformed(data, message):
    with pytest.raises(ValueError, match=message):
        graph_from_dict(data)


def test_graph_from_dict_duplicate_edge():
    with pytest.raises(ValueError, match="already exists"):
        graph_from_dict({"edges": [["A", "B", 1], ["A", "B", 2]]})


def test_load_yaml(tmp_path: Path):
    path = tmp_path / "graph.yaml"
    path.write_text(GENERAL_YAML)
    g = load_graph(path)
    assert g.vertex_count() == 5
    assert g.edge_count() == 9
    assert g.cost(["A", "B", "C"]) == 9
    assert [e.terminal for e in g.edges_of("A")] == ["B", "D", "E"]


def test_load_node_link_json(tmp_path: Path, general_graph):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(graph_to_node_link(general_graph)))
    g = load_graph(str(path))
    for vertex in general_graph.nodes:
        assert g.edges_of(vertex) == general_graph.edges_of(vertex)


def test_load_empty_file(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_graph(path).vertex_count() == 0


def test_load_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- A\n- B\n")
    with pytest.raises(ValueError, match="must map to a dictionary"):
        load_graph(path)


def test_node_link_keeps_graph_attributes(general_graph):
    general_graph.graph["name"] = "general"
    data = graph_to_node_link(general_graph)
    assert data["graph"] == {"name": "general"}
    assert node_link_to_graph(data).graph["name"] == "general"

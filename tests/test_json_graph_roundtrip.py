"""Tests for JSON import/export of graphs."""

import json

import pytest

from digraphkit.graphs import ArgumentError, Edge, Graph, ValidationError
from digraphkit.io import (
    dump_json_graph,
    dumps_graph,
    graph_to_json,
    json_graph_schema,
    json_to_graph,
    load_json_graph,
    loads_graph,
    validate_json_graph,
)


def test_graph_to_json_shape(path_graph):
    """Test that the JSON form carries exactly vertices and edges."""
    obj = graph_to_json(path_graph)
    assert obj == {
        "vertices": [0, 1, 2],
        "edges": [{"from": 0, "to": 1}, {"from": 1, "to": 2}],
    }


def test_weights_serialized():
    """Test that weights appear only on weighted edges."""
    G = Graph([0, 1, 2], [(0, 1, -2.5), (1, 2)])
    assert graph_to_json(G)["edges"] == [
        {"from": 0, "to": 1, "weight": -2.5},
        {"from": 1, "to": 2},
    ]


def test_serialize_round_trip(cycle_with_tails):
    """Test that serialize/deserialize preserves vertices and edges."""
    restored = Graph.deserialize(cycle_with_tails.serialize())
    assert restored.vertices == cycle_with_tails.vertices
    assert restored.edges == cycle_with_tails.edges


def test_round_trip_random(random_graph):
    """Test round trips of random weighted graphs."""
    for n in (1, 4, 9):
        G = random_graph(n, low=-5, high=5)
        assert loads_graph(dumps_graph(G)) == G


def test_round_trip_sparse_ids():
    """Test round trip with negative, non-contiguous vertex ids."""
    G = Graph([-3, 40, 7], [Edge(40, -3, 1.5), Edge(7, 7)])
    assert Graph.deserialize(G.serialize()) == G


def test_from_dict(path_graph):
    """Test Graph.from_dict on the to_dict form."""
    assert Graph.from_dict(path_graph.to_dict()) == path_graph


def test_deserialize_invalid_json():
    """Test that unparsable text raises ArgumentError."""
    with pytest.raises(ArgumentError, match="parse"):
        Graph.deserialize("not a json")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"vertices": [0, 1]},
        {"edges": []},
        {"vertices": "0,1", "edges": []},
        {"vertices": [0, 1], "edges": {"from": 0, "to": 1}},
        [0, 1],
        None,
    ],
)
def test_deserialize_invalid_structure(payload):
    """Test that payloads without list-typed fields raise ArgumentError."""
    with pytest.raises(ArgumentError):
        loads_graph(json.dumps(payload))


def test_deserialize_validates_endpoints():
    """Test that endpoint existence is checked by the Graph constructor."""
    text = json.dumps({"vertices": [0], "edges": [{"from": 0, "to": 1}]})
    with pytest.raises(ValidationError):
        Graph.deserialize(text)


def test_deserialize_malformed_edge():
    """Test that a malformed edge item raises ArgumentError."""
    text = json.dumps({"vertices": [0, 1], "edges": [{"source": 0, "target": 1}]})
    with pytest.raises(ArgumentError):
        Graph.deserialize(text)


def test_deserialize_infinite_weight():
    """Test that a non-standard Infinity weight is rejected on load."""
    text = '{"vertices": [0, 1], "edges": [{"from": 0, "to": 1, "weight": Infinity}]}'
    with pytest.raises(ArgumentError, match="finite"):
        Graph.deserialize(text)


def test_validate_accepts_valid(path_graph):
    """Test that a valid payload passes validation."""
    validate_json_graph(graph_to_json(path_graph))
    assert json_to_graph(graph_to_json(path_graph)) == path_graph


def test_schema_required_fields():
    """Test that the schema names both required fields."""
    schema = json_graph_schema()
    assert schema["vertices"]["required"] is True
    assert schema["edges"]["required"] is True
    assert schema["edges"]["items"]["weight"]["required"] is False


def test_file_round_trip(tmp_path, cycle_with_tails):
    """Test dump_json_graph / load_json_graph."""
    path = tmp_path / "graph.json"
    dump_json_graph(cycle_with_tails, str(path))
    assert load_json_graph(str(path)) == cycle_with_tails


def test_load_missing_file(tmp_path):
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_json_graph(str(tmp_path / "absent.json"))


def test_load_invalid_file(tmp_path):
    """Test that a non-JSON file raises ArgumentError."""
    path = tmp_path / "broken.json"
    path.write_text("{vertices: [0]", encoding="utf-8")
    with pytest.raises(ArgumentError, match="Invalid JSON"):
        load_json_graph(str(path))

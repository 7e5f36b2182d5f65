"""JSON import and export for graphs.

The interchange form carries exactly two fields, ``vertices`` and ``edges``;
see schema.py. Graph.serialize / Graph.deserialize delegate here.
"""

from __future__ import annotations

import json
from typing import Any

from digraphkit.graphs.core import Graph
from digraphkit.graphs.errors import ArgumentError
from digraphkit.logging import get_logger

from .schema import validate_json_graph

logger = get_logger(__name__)


def graph_to_json(graph: Graph) -> dict:
    """
    Convert a Graph to its JSON object form.

    Parameters
    ----------
    graph : Graph
        Graph to convert.

    Returns
    -------
    dict
        ``{"vertices": [...], "edges": [{"from", "to"[, "weight"]}, ...]}``.
    """
    return graph.to_dict()


def json_to_graph(obj: Any) -> Graph:
    """
    Convert a JSON object to a Graph.

    Parameters
    ----------
    obj : Any
        Decoded JSON payload.

    Returns
    -------
    Graph
        Reconstructed graph.

    Raises
    ------
    ArgumentError
        If the payload shape is invalid or an item is malformed.
    ValidationError
        If an edge references a vertex absent from ``vertices``.
    """
    validate_json_graph(obj)
    return Graph(obj["vertices"], obj["edges"])


def dumps_graph(graph: Graph) -> str:
    """Serialize a Graph to JSON text."""
    return json.dumps(graph_to_json(graph))


def loads_graph(text: str) -> Graph:
    """
    Deserialize a Graph from JSON text.

    Raises
    ------
    ArgumentError
        If the text is not valid JSON or the payload shape is invalid.
    ValidationError
        If an edge references a vertex absent from ``vertices``.
    """
    try:
        obj = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ArgumentError(f"Could not parse graph JSON: {e}")
    return json_to_graph(obj)


def dump_json_graph(graph: Graph, path: str) -> None:
    """
    Write a Graph to a JSON file.

    Parameters
    ----------
    graph : Graph
        Graph to write.
    path : str
        Path to output JSON file.
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(graph_to_json(graph), f, indent=2, ensure_ascii=False)
    logger.debug("Wrote graph with %d vertices to %s", len(graph.vertices), path)


def load_json_graph(path: str) -> Graph:
    """
    Load a Graph from a JSON file.

    Parameters
    ----------
    path : str
        Path to input JSON file.

    Returns
    -------
    Graph
        Loaded graph.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ArgumentError
        If the file is not valid JSON or the payload shape is invalid.
    ValidationError
        If an edge references a vertex absent from ``vertices``.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON graph file not found: {path}")
    except json.JSONDecodeError as e:
        raise ArgumentError(f"Invalid JSON in file {path}: {e}")

    return json_to_graph(obj)


__all__ = [
    "graph_to_json",
    "json_to_graph",
    "dumps_graph",
    "loads_graph",
    "dump_json_graph",
    "load_json_graph",
]

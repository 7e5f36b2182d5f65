"""JSON import/export for graphs."""

from .json_graph import (
    dump_json_graph,
    dumps_graph,
    graph_to_json,
    json_to_graph,
    load_json_graph,
    loads_graph,
)
from .schema import json_graph_schema, validate_json_graph

__all__ = [
    "graph_to_json",
    "json_to_graph",
    "dumps_graph",
    "loads_graph",
    "dump_json_graph",
    "load_json_graph",
    "json_graph_schema",
    "validate_json_graph",
]

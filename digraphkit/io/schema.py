"""JSON schema definition and structural validation for graphs.

Schema Structure:
    {
        "vertices": [<integer>, ...],
        "edges": [
            {
                "from": <integer>,
                "to": <integer>,
                "weight": <number>,   # optional
            },
            ...
        ]
    }

Validation here is structural only: both fields must be present and be
lists. Item types and endpoint existence are checked when the payload is fed
to the Graph constructor, which validates every graph regardless of origin.
"""

from __future__ import annotations

from typing import Any

from digraphkit.graphs.errors import ArgumentError

REQUIRED_FIELDS = ("vertices", "edges")


def json_graph_schema() -> dict:
    """
    Return the schema (as a Python dict) for the JSON graph format.

    This is a structural description, not a full JSON Schema validator.

    Returns
    -------
    dict
        Schema description with field definitions.
    """
    return {
        "vertices": {
            "type": "list",
            "description": "Vertex identifiers, in matrix index order",
            "required": True,
            "items": {"type": "integer"},
        },
        "edges": {
            "type": "list",
            "description": "Directed edges",
            "required": True,
            "items": {
                "from": {"type": "integer", "required": True},
                "to": {"type": "integer", "required": True},
                "weight": {
                    "type": "number",
                    "required": False,
                    "description": "Edge weight; algorithms treat a missing weight as 1",
                },
            },
        },
    }


def validate_json_graph(obj: Any) -> None:
    """
    Validate a JSON graph object against the schema.

    Parameters
    ----------
    obj : Any
        Decoded JSON payload.

    Raises
    ------
    ArgumentError
        If obj is not an object or a required field is missing or not a list.
    """
    if not isinstance(obj, dict):
        raise ArgumentError(
            f"Graph payload must be a JSON object, got {type(obj).__name__}."
        )

    for field in REQUIRED_FIELDS:
        if field not in obj:
            raise ArgumentError(f"Graph payload is missing required field '{field}'.")
        if not isinstance(obj[field], list):
            raise ArgumentError(
                f"Graph payload field '{field}' must be a list, "
                f"got {type(obj[field]).__name__}."
            )

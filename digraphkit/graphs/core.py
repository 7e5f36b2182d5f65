"""
Core graph value types.

Provides Edge and Graph. A Graph is an immutable pair of a vertex sequence and
an edge sequence: every "mutation" returns a new Graph, and a mutation that
would change nothing returns the very same object, so callers can detect a
no-op with ``is``.

Vertex order is insertion order and doubles as the row/column index used by
the matrix representations.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from .errors import ArgumentError, ValidationError

Vertex = int
Weight = Union[int, float]
EdgeLike = Union["Edge", Mapping, Tuple[Any, ...]]


def as_vertex(value: Any, what: str = "Vertex") -> Vertex:
    """
    Validate a vertex identifier and normalize it to a plain int.

    Args:
        value: Candidate vertex (int or numpy integer; bool is rejected).
        what: Noun used in the error message.

    Returns:
        The vertex as int.

    Raises:
        ArgumentError: If value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ArgumentError(f"{what} must be an integer, got {value!r}")
    return int(value)


def _as_weight(value: Any) -> Optional[Weight]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ArgumentError(f"Edge weight must be a real number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    value = float(value)
    if not math.isfinite(value):
        raise ArgumentError(f"Edge weight must be finite, got {value!r}")
    return value


def is_sequence(value: Any) -> bool:
    """Return True for lists, tuples, 1-d arrays and other non-string sequences."""
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass(frozen=True)
class Edge:
    """
    Directed edge ``source -> target`` with an optional weight.

    Attributes:
        source: Tail vertex.
        target: Head vertex.
        weight: Real weight, or None when the edge is unweighted.
    """

    source: Vertex
    target: Vertex
    weight: Optional[Weight] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", as_vertex(self.source, "Edge source"))
        object.__setattr__(self, "target", as_vertex(self.target, "Edge target"))
        object.__setattr__(self, "weight", _as_weight(self.weight))

    @property
    def effective_weight(self) -> Weight:
        """Weight used by weighted algorithms: an absent weight counts as 1."""
        return 1 if self.weight is None else self.weight

    @property
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self.source, self.target

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{"from", "to"[, "weight"]}`` form used for serialization."""
        data: Dict[str, Any] = {"from": self.source, "to": self.target}
        if self.weight is not None:
            data["weight"] = self.weight
        return data

    @classmethod
    def coerce(cls, edge: EdgeLike) -> "Edge":
        """
        Build an Edge from any accepted edge form.

        Accepted forms are an Edge, a mapping with ``"from"``/``"to"`` and an
        optional ``"weight"`` key, or a ``(u, v)`` / ``(u, v, w)`` tuple.

        Raises:
            ArgumentError: If the edge is malformed.
        """
        if isinstance(edge, Edge):
            return edge
        if isinstance(edge, Mapping):
            if "from" not in edge or "to" not in edge:
                raise ArgumentError(f"Edge must have 'from' and 'to' keys, got {dict(edge)!r}")
            return cls(edge["from"], edge["to"], edge.get("weight"))
        if isinstance(edge, tuple) or (is_sequence(edge) and not isinstance(edge, np.ndarray)):
            if len(edge) not in (2, 3):
                raise ArgumentError(f"Edge tuple must be (from, to) or (from, to, weight), got {edge!r}")
            return cls(*edge)
        raise ArgumentError(f"Edge must be an Edge, a mapping or a tuple, got {edge!r}")


class Graph:
    """
    Immutable directed graph over integer vertices.

    Duplicate edges are allowed when passed to the constructor; ``with_edge``
    never introduces one. Graphs are hashable and compare equal when their
    vertex and edge sequences are equal.

    Example:
        >>> G = Graph([0, 1, 2], [(0, 1), (1, 2)])
        >>> G.adjacency_matrix()
        [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
        >>> G.with_vertex(1) is G
        True
    """

    def __init__(self, vertices: Iterable[Any] = (), edges: Iterable[EdgeLike] = ()):
        """
        Build and validate a graph.

        Args:
            vertices: Sequence of integer vertices, in index order.
            edges: Sequence of edges in any form accepted by Edge.coerce.

        Raises:
            ArgumentError: If vertices or edges is not a sequence, or an item is malformed.
            ValidationError: If a vertex repeats or an edge references an absent vertex.
        """
        if not is_sequence(vertices):
            raise ArgumentError(f"Vertices must be a sequence, got {type(vertices).__name__}")
        if not is_sequence(edges):
            raise ArgumentError(f"Edges must be a sequence, got {type(edges).__name__}")

        vertex_tuple = tuple(as_vertex(v) for v in vertices)
        edge_tuple = tuple(Edge.coerce(e) for e in edges)

        vertex_set = frozenset(vertex_tuple)
        if len(vertex_set) != len(vertex_tuple):
            raise ValidationError("Vertices must be unique")
        for edge in edge_tuple:
            for endpoint in edge.endpoints:
                if endpoint not in vertex_set:
                    raise ValidationError(f"Vertex {endpoint} not found in graph")

        object.__setattr__(self, "_vertices", vertex_tuple)
        object.__setattr__(self, "_edges", edge_tuple)
        object.__setattr__(self, "_vertex_set", vertex_set)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Graph is immutable; derive a new graph with with_*/without_*")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Graph is immutable")

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertex_set

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._vertices == other._vertices and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._vertices, self._edges))

    def __repr__(self) -> str:
        edges = ", ".join(
            f"{e.source}->{e.target}" + ("" if e.weight is None else f"({e.weight})")
            for e in self._edges
        )
        return f"Graph(vertices={list(self._vertices)}, edges=[{edges}])"

    # -----------------
    # LOOKUPS
    # -----------------

    @cached_property
    def _index(self) -> Dict[Vertex, int]:
        return {v: i for i, v in enumerate(self._vertices)}

    @cached_property
    def _successors(self) -> Dict[Vertex, List[Vertex]]:
        adj: Dict[Vertex, List[Vertex]] = {v: [] for v in self._vertices}
        for edge in self._edges:
            adj[edge.source].append(edge.target)
        return adj

    @cached_property
    def _predecessors(self) -> Dict[Vertex, List[Vertex]]:
        adj: Dict[Vertex, List[Vertex]] = {v: [] for v in self._vertices}
        for edge in self._edges:
            adj[edge.target].append(edge.source)
        return adj

    def _require_vertex(self, vertex: Any) -> Vertex:
        vertex = as_vertex(vertex)
        if vertex not in self._vertex_set:
            raise ValidationError(f"Vertex {vertex} not found in graph")
        return vertex

    def index_of(self, vertex: Vertex) -> int:
        """
        Return the matrix row/column index of a vertex.

        Raises:
            ValidationError: If vertex is not in the graph.
        """
        return self._index[self._require_vertex(vertex)]

    def successors(self, vertex: Vertex) -> List[Vertex]:
        """
        Return the heads of the edges leaving vertex, in edge order.

        Raises:
            ValidationError: If vertex is not in the graph.
        """
        return list(self._successors[self._require_vertex(vertex)])

    def predecessors(self, vertex: Vertex) -> List[Vertex]:
        """
        Return the tails of the edges entering vertex, in edge order.

        Raises:
            ValidationError: If vertex is not in the graph.
        """
        return list(self._predecessors[self._require_vertex(vertex)])

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return any(e.source == source and e.target == target for e in self._edges)

    # -----------------
    # DERIVED GRAPHS
    # -----------------

    def with_vertex(self, vertex: Vertex) -> "Graph":
        """
        Return a graph with vertex appended, or self if it is already present.

        Raises:
            ArgumentError: If vertex is not an integer.
        """
        vertex = as_vertex(vertex)
        if vertex in self._vertex_set:
            return self
        return Graph(self._vertices + (vertex,), self._edges)

    def without_vertex(self, vertex: Vertex) -> "Graph":
        """
        Return a graph without vertex and every edge touching it, or self if absent.

        Raises:
            ArgumentError: If vertex is not an integer.
        """
        vertex = as_vertex(vertex)
        if vertex not in self._vertex_set:
            return self
        return Graph(
            [v for v in self._vertices if v != vertex],
            [e for e in self._edges if e.source != vertex and e.target != vertex],
        )

    def _checked_edge(self, edge: EdgeLike) -> Edge:
        edge = Edge.coerce(edge)
        for endpoint in edge.endpoints:
            if endpoint not in self._vertex_set:
                raise ValidationError(f"Vertex {endpoint} not found in graph")
        return edge

    def with_edge(self, edge: EdgeLike) -> "Graph":
        """
        Return a graph with edge appended, or self if an edge with the same
        endpoints already exists.

        Raises:
            ArgumentError: If edge is malformed.
            ValidationError: If an endpoint is not in the graph.
        """
        edge = self._checked_edge(edge)
        if self.has_edge(edge.source, edge.target):
            return self
        return Graph(self._vertices, self._edges + (edge,))

    def without_edge(self, edge: EdgeLike) -> "Graph":
        """
        Return a graph without every edge sharing edge's endpoints, or self if
        there is none. The weight of the given edge is ignored.

        Raises:
            ArgumentError: If edge is malformed.
            ValidationError: If an endpoint is not in the graph.
        """
        edge = self._checked_edge(edge)
        if not self.has_edge(edge.source, edge.target):
            return self
        return Graph(
            self._vertices,
            [e for e in self._edges if e.endpoints != edge.endpoints],
        )

    def clone(self) -> "Graph":
        """Return an equal but distinct Graph."""
        return Graph(self._vertices, self._edges)

    def subgraph(self, vertices: Iterable[Vertex]) -> "Graph":
        """
        Return the subgraph induced by vertices, keeping this graph's vertex
        and edge order.
        """
        keep = {as_vertex(v) for v in vertices}
        return Graph(
            [v for v in self._vertices if v in keep],
            [e for e in self._edges if e.source in keep and e.target in keep],
        )

    # -----------------
    # SERIALIZATION
    # -----------------

    def to_dict(self) -> Dict[str, Any]:
        """Return ``{"vertices": [...], "edges": [{"from", "to"[, "weight"]}, ...]}``."""
        return {
            "vertices": list(self._vertices),
            "edges": [e.to_dict() for e in self._edges],
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "Graph":
        """
        Build a graph from the dictionary form produced by to_dict.

        Raises:
            ArgumentError: If either field is missing or not a list.
            ValidationError: If an edge references an absent vertex.
        """
        from digraphkit.io.json_graph import json_to_graph

        return json_to_graph(payload)

    def serialize(self) -> str:
        """Return the graph as JSON text."""
        from digraphkit.io.json_graph import dumps_graph

        return dumps_graph(self)

    @classmethod
    def deserialize(cls, text: str) -> "Graph":
        """
        Parse JSON text produced by serialize.

        Raises:
            ArgumentError: If the text is not JSON or lacks list-typed fields.
            ValidationError: If an edge references an absent vertex.
        """
        from digraphkit.io.json_graph import loads_graph

        return loads_graph(text)

    # -----------------
    # REPRESENTATIONS AND ALGORITHMS
    # -----------------

    def adjacency_matrix(self) -> List[List[int]]:
        from .convert import to_adjacency_matrix

        return to_adjacency_matrix(self)

    def incidence_matrix(self) -> List[List[int]]:
        from .convert import to_incidence_matrix

        return to_incidence_matrix(self)

    def incidence_list(self, side: str = "left") -> Dict[Vertex, List[Vertex]]:
        from .convert import to_incidence_list

        return to_incidence_list(self, side)

    def adjacency_list(self) -> Dict[Vertex, List[Tuple[Vertex, Weight]]]:
        from .convert import to_adjacency_list

        return to_adjacency_list(self)

    def hierarchy_levels(self) -> List[List[Vertex]]:
        from .hierarchy import hierarchy_levels

        return hierarchy_levels(self)

    def decompose(self):
        from .decomposition import decompose

        return decompose(self)

    def has_path(self, source: Vertex, target: Vertex, method: str = "dfs") -> bool:
        """
        Return True if a directed path leads from source to target.

        Args:
            method: "dfs" or "bfs"; both give the same answer.
        """
        from .traversal import breadth_first_path, depth_first_path

        if method == "dfs":
            return depth_first_path(self, source, target)
        if method == "bfs":
            return breadth_first_path(self, source, target)
        raise ArgumentError(f"Search method must be 'dfs' or 'bfs', got {method!r}")

    def bellman_ford(self, start: Vertex) -> Dict[Vertex, float]:
        from .shortest import bellman_ford

        return bellman_ford(self, start)

    def dijkstra(self, start: Vertex) -> Dict[Vertex, float]:
        from .shortest import dijkstra

        return dijkstra(self, start)

    def johnson(self) -> Dict[Vertex, Dict[Vertex, float]]:
        from .allpairs import johnson

        return johnson(self)

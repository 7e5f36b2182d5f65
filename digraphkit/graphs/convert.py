"""
Conversions between a Graph and the standard discrete-math representations.

Matrices are indexed by vertex position (the order of ``graph.vertices``) and
returned as nested Python lists. Inputs may be nested lists or numpy arrays.

Representations:
    - Adjacency matrix: n x n, cell (i, j) is 1 when an edge i -> j exists.
    - Distance matrix: n x n, cell (i, j) is the weight of i -> j or None.
    - Incidence matrix: n x m, column k holds -1 at the source row and +1 at
      the target row of edge k.
    - Incidence list: vertex -> neighbors. With side="left" the key is the
      edge source; with side="right" the key is the edge target.
    - Adjacency list: vertex -> [(target, effective weight), ...].
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Tuple

import numpy as np

from .core import Edge, Graph, Vertex, Weight, as_vertex, is_sequence
from .errors import ArgumentError, ValidationError

SIDES = ("left", "right")


def _check_side(side: str) -> None:
    if side not in SIDES:
        raise ArgumentError(f"Side must be 'left' or 'right', got {side!r}")


def _has_text_cells(matrix: Any) -> bool:
    # np.asarray(dtype=float) would silently parse "1" as 1.0
    if isinstance(matrix, np.ndarray):
        if matrix.dtype.kind in "US":
            return True
        cells = matrix.ravel() if matrix.dtype.kind == "O" else ()
    else:
        cells = [cell for row in matrix if is_sequence(row) for cell in row]
        cells += [row for row in matrix if isinstance(row, (str, bytes))]
    return any(isinstance(cell, (str, bytes)) for cell in cells)


def _square_array(matrix: Any, name: str) -> np.ndarray:
    """Convert matrix to a float array and check that it is square."""
    if isinstance(matrix, (str, bytes)) or not (
        isinstance(matrix, np.ndarray) or is_sequence(matrix)
    ):
        raise ArgumentError(f"{name} must be a list of rows, got {type(matrix).__name__}")
    if len(matrix) == 0:
        return np.zeros((0, 0))
    if _has_text_cells(matrix):
        raise ArgumentError(f"{name} cells must be numbers, not strings")
    try:
        array = np.asarray(matrix, dtype=float)
    except (TypeError, ValueError) as e:
        raise ArgumentError(f"{name} must be a rectangular table of numbers: {e}")
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ArgumentError(f"{name} must be square, got shape {array.shape}")
    return array


def from_adjacency_matrix(matrix: Any) -> Graph:
    """
    Build a graph from an adjacency matrix.

    Vertex i exists for every row i; a nonzero cell (i, j) becomes the
    unweighted edge i -> j.

    Args:
        matrix: Square matrix (nested lists or numpy array).

    Returns:
        New Graph with vertices 0..n-1.

    Raises:
        ArgumentError: If matrix is not a square table of numbers.

    Example:
        >>> from_adjacency_matrix([[0, 1], [0, 0]]).edges
        (Edge(source=0, target=1, weight=None),)
    """
    array = _square_array(matrix, "Adjacency matrix")
    n = array.shape[0]
    # empty (None) cells mean "no edge"
    rows, cols = np.nonzero(np.nan_to_num(array, nan=0.0))
    edges = [Edge(int(i), int(j)) for i, j in zip(rows, cols)]
    return Graph(list(range(n)), edges)


def from_distance_matrix(matrix: Any) -> Graph:
    """
    Build a weighted graph from a distance matrix.

    The diagonal is ignored. Every other cell holding a number becomes an
    edge with that weight; None, NaN and infinite cells mean "no edge".

    Args:
        matrix: Square matrix of numbers or None.

    Returns:
        New Graph with vertices 0..n-1 and weighted edges.

    Raises:
        ArgumentError: If matrix is not a square table of numbers/None.
    """
    array = _square_array(matrix, "Distance matrix")
    n = array.shape[0]
    edges = []
    for i in range(n):
        for j in range(n):
            if i == j or not np.isfinite(array[i, j]):
                continue
            value = array[i, j]
            weight: Weight = int(value) if float(value).is_integer() else float(value)
            edges.append(Edge(i, j, weight))
    return Graph(list(range(n)), edges)


def _list_key(key: Any) -> Vertex:
    # JSON object keys arrive as strings
    if isinstance(key, str):
        try:
            return int(key)
        except ValueError:
            raise ArgumentError(f"Incidence list key must be an integer, got {key!r}")
    return as_vertex(key, "Incidence list key")


def from_incidence_list(incidence: Mapping, side: str = "left") -> Graph:
    """
    Build a graph from an incidence list.

    Args:
        incidence: Mapping vertex -> list of neighbor vertices. Keys may be
            ints or integer strings.
        side: "left" if keys are edge sources, "right" if keys are edge targets.

    Returns:
        New Graph whose vertices are the keys, in mapping order.

    Raises:
        ArgumentError: If incidence is not a mapping, side is invalid, a value
            is not a list or a neighbor is not an integer.
        ValidationError: If a neighbor is not itself a key.
    """
    if not isinstance(incidence, Mapping):
        raise ArgumentError(f"Incidence list must be a mapping, got {type(incidence).__name__}")
    _check_side(side)

    vertices: List[Vertex] = []
    edges: List[Edge] = []
    for key, neighbors in incidence.items():
        vertex = _list_key(key)
        vertices.append(vertex)
        if not is_sequence(neighbors):
            raise ArgumentError(f"Neighbors of vertex {vertex} must be a list, got {neighbors!r}")
        for neighbor in neighbors:
            neighbor = as_vertex(neighbor, "Neighbor")
            if side == "left":
                edges.append(Edge(vertex, neighbor))
            else:
                edges.append(Edge(neighbor, vertex))
    return Graph(vertices, edges)


def _require_vertices(graph: Graph) -> None:
    if len(graph.vertices) == 0:
        raise ValidationError("Cannot build a matrix for an empty graph")


def to_adjacency_matrix(graph: Graph) -> List[List[int]]:
    """
    Return the n x n 0/1 adjacency matrix of graph.

    Raises:
        ValidationError: If the graph has no vertices.
    """
    _require_vertices(graph)
    n = len(graph.vertices)
    matrix = np.zeros((n, n), dtype=int)
    for edge in graph.edges:
        matrix[graph.index_of(edge.source), graph.index_of(edge.target)] = 1
    return matrix.tolist()


def to_incidence_matrix(graph: Graph) -> List[List[int]]:
    """
    Return the n x m incidence matrix of graph.

    Column k has -1 at the source row and +1 at the target row of edge k.
    A graph without edges yields n empty rows.

    Raises:
        ValidationError: If the graph has no vertices.
    """
    _require_vertices(graph)
    n = len(graph.vertices)
    m = len(graph.edges)
    if m == 0:
        return [[] for _ in range(n)]
    matrix = np.zeros((n, m), dtype=int)
    for k, edge in enumerate(graph.edges):
        matrix[graph.index_of(edge.source), k] = -1
        matrix[graph.index_of(edge.target), k] = 1
    return matrix.tolist()


def to_incidence_list(graph: Graph, side: str = "left") -> Dict[Vertex, List[Vertex]]:
    """
    Return the incidence list of graph.

    Args:
        side: "left" groups targets under their source, "right" groups
            sources under their target.

    Raises:
        ArgumentError: If side is invalid.
    """
    _check_side(side)
    incidence: Dict[Vertex, List[Vertex]] = {v: [] for v in graph.vertices}
    for edge in graph.edges:
        if side == "left":
            incidence[edge.source].append(edge.target)
        else:
            incidence[edge.target].append(edge.source)
    return incidence


def to_adjacency_list(graph: Graph) -> Dict[Vertex, List[Tuple[Vertex, Weight]]]:
    """
    Return vertex -> [(target, weight), ...] with absent weights reported as 1.
    """
    adjacency: Dict[Vertex, List[Tuple[Vertex, Weight]]] = {v: [] for v in graph.vertices}
    for edge in graph.edges:
        adjacency[edge.source].append((edge.target, edge.effective_weight))
    return adjacency

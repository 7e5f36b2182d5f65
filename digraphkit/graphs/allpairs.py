"""
All-pairs shortest paths: Johnson's algorithm.

Tolerates negative edge weights as long as there is no negative cycle:

1. Add a virtual vertex q with a zero-weight edge to every vertex.
2. Run Bellman-Ford from q to get a potential h(v) for every vertex.
3. Reweight every edge: w'(u, v) = w(u, v) + h(u) - h(v) >= 0.
4. Run Dijkstra from every vertex on the reweighted graph.
5. Recover true distances: d(u, v) = d'(u, v) - h(u) + h(v).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.3 (Johnson's algorithm).
"""

from typing import Dict

from digraphkit.diagnostics import check_non_negative_weights
from digraphkit.logging import get_logger

from .core import Edge, Graph, Vertex
from .shortest import INF, bellman_ford, dijkstra

logger = get_logger(__name__)


def virtual_vertex(graph: Graph) -> Vertex:
    """Return a vertex id not used by graph (one past the largest id)."""
    return max(graph.vertices) + 1 if graph.vertices else 0


def potentials(graph: Graph) -> Dict[Vertex, float]:
    """
    Compute Johnson's potential h(v) for every vertex of graph.

    Raises:
        ValidationError: If the graph contains a negative-weight cycle.
    """
    q = virtual_vertex(graph)
    augmented = Graph(
        graph.vertices + (q,),
        graph.edges + tuple(Edge(q, v, 0) for v in graph.vertices),
    )
    h = bellman_ford(augmented, q)
    del h[q]
    return h


_ROUNDING_TOLERANCE = 1e-9


def reweight(graph: Graph, h: Dict[Vertex, float]) -> Graph:
    """
    Return graph with every weight replaced by w + h(u) - h(v).

    Float rounding can leave a reduced weight a hair below zero; such values
    are clamped to 0 so Dijkstra sees a non-negative graph.
    """
    edges = []
    for e in graph.edges:
        weight = e.effective_weight + h[e.source] - h[e.target]
        if -_ROUNDING_TOLERANCE < weight < 0:
            weight = 0.0
        edges.append(Edge(e.source, e.target, weight))
    return Graph(graph.vertices, edges)


def johnson(graph: Graph) -> Dict[Vertex, Dict[Vertex, float]]:
    """
    Johnson's algorithm for all-pairs shortest paths.

    Args:
        graph: Graph (may have negative weights, not negative cycles).

    Returns:
        Dictionary mapping source -> {target -> shortest distance (float or inf)}.
        An empty graph yields an empty dictionary.

    Raises:
        ValidationError: If the graph contains a negative-weight cycle.

    Complexity: O(VE log V).

    Example:
        >>> G = Graph([0, 1, 2], [(0, 1, 4), (1, 2, -2), (0, 2, 3)])
        >>> johnson(G)[0][2]
        2.0
    """
    if len(graph.vertices) == 0:
        return {}

    h = potentials(graph)
    reweighted = reweight(graph, h)

    check_non_negative_weights(reweighted.edges, "Johnson reweighting")

    result: Dict[Vertex, Dict[Vertex, float]] = {}
    for u in graph.vertices:
        reduced = dijkstra(reweighted, u)
        result[u] = {
            v: INF if d == INF else d - h[u] + h[v]
            for v, d in reduced.items()
        }

    logger.debug("Computed all-pairs distances for %d vertices", len(graph.vertices))
    return result

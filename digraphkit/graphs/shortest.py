"""
Single-source shortest paths: Bellman-Ford and Dijkstra.

Both return a distance map vertex -> shortest distance from the start vertex,
with float("inf") for unreachable vertices. Unweighted edges count as 1.

Bellman-Ford accepts negative weights and rejects negative cycles.
Dijkstra requires non-negative weights. That precondition is the caller's
responsibility and is only checked while debug mode is enabled; with
negative weights and debug mode off the result is undefined.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import heapq
from typing import Dict, List, Set, Tuple

from digraphkit.diagnostics import check_non_negative_weights
from digraphkit.logging import get_logger

from .convert import to_adjacency_list
from .core import Graph, Vertex
from .errors import ValidationError

logger = get_logger(__name__)

INF = float("inf")


def bellman_ford(graph: Graph, start: Vertex) -> Dict[Vertex, float]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Relaxes every edge |V| - 1 times, then makes one more pass: any edge that
    still relaxes proves a negative-weight cycle reachable from start.

    Args:
        graph: Graph (may have negative weights).
        start: Source vertex.

    Returns:
        Dictionary mapping vertex -> shortest distance from start (float or inf).

    Raises:
        ValidationError: If start is not in graph.
        ValidationError: If a negative-weight cycle is reachable from start.

    Complexity: O(VE).

    Example:
        >>> G = Graph([0, 1, 2], [(0, 1, 1), (1, 2, -2)])
        >>> bellman_ford(G, 0)[2]
        -1.0
    """
    graph.index_of(start)

    dist: Dict[Vertex, float] = {v: INF for v in graph.vertices}
    dist[start] = 0.0

    edges = [(e.source, e.target, e.effective_weight) for e in graph.edges]

    for _ in range(len(graph.vertices) - 1):
        changed = False
        for u, v, weight in edges:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break

    for u, v, weight in edges:
        if dist[u] != INF and dist[u] + weight < dist[v]:
            logger.warning("Negative-weight cycle detected through edge %s -> %s", u, v)
            raise ValidationError("Graph contains a negative-weight cycle")

    return dist


def dijkstra(graph: Graph, start: Vertex) -> Dict[Vertex, float]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        graph: Graph with non-negative edge weights.
        start: Source vertex.

    Returns:
        Dictionary mapping vertex -> shortest distance from start (float or inf).

    Raises:
        ValidationError: If start is not in graph.
        ValidationError: If debug mode is enabled and a weight is negative.

    Complexity: O(E log V) using a binary heap.

    Example:
        >>> G = Graph([0, 1, 2], [(0, 1, 1), (1, 2, 2), (0, 2, 5)])
        >>> dijkstra(G, 0)[2]
        3.0
    """
    position = graph.index_of(start)
    check_non_negative_weights(graph.edges, "Dijkstra")
    adjacency = to_adjacency_list(graph)

    dist: Dict[Vertex, float] = {v: INF for v in graph.vertices}
    dist[start] = 0.0

    # (distance, vertex position, vertex): ties break on vertex order
    pq: List[Tuple[float, int, Vertex]] = [(0.0, position, start)]
    visited: Set[Vertex] = set()

    while pq:
        d, _, u = heapq.heappop(pq)

        if u in visited:
            continue
        visited.add(u)

        for v, weight in adjacency[u]:
            if v in visited:
                continue
            new_dist = d + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                heapq.heappush(pq, (new_dist, graph.index_of(v), v))

    return dist

"""
Directed graph engine for digraphkit.

This package provides:
- An immutable Graph value type with validated construction (Graph, Edge)
- Conversions to and from adjacency/distance/incidence matrices and lists
- Reachability search (DFS, BFS)
- Hierarchy levels (Kahn's algorithm)
- Strongly connected components with condensation links
- Shortest paths (Bellman-Ford, Dijkstra, Johnson all-pairs)

Vertex order is insertion order and is used as the matrix index everywhere.
"""

from .allpairs import johnson
from .convert import (
    from_adjacency_matrix,
    from_distance_matrix,
    from_incidence_list,
    to_adjacency_list,
    to_adjacency_matrix,
    to_incidence_list,
    to_incidence_matrix,
)
from .core import Edge, Graph
from .decomposition import ComponentLink, Decomposition, decompose
from .errors import ArgumentError, GraphError, ValidationError
from .hierarchy import hierarchy_levels, renumber_by_levels
from .shortest import bellman_ford, dijkstra
from .traversal import ancestors, breadth_first_path, depth_first_path, descendants

__all__ = [
    "Graph",
    "Edge",
    "GraphError",
    "ArgumentError",
    "ValidationError",
    "from_adjacency_matrix",
    "from_distance_matrix",
    "from_incidence_list",
    "to_adjacency_matrix",
    "to_incidence_matrix",
    "to_incidence_list",
    "to_adjacency_list",
    "depth_first_path",
    "breadth_first_path",
    "descendants",
    "ancestors",
    "hierarchy_levels",
    "renumber_by_levels",
    "decompose",
    "Decomposition",
    "ComponentLink",
    "bellman_ford",
    "dijkstra",
    "johnson",
]

# Example usage:
# from digraphkit.graphs import from_distance_matrix, johnson
#
# G = from_distance_matrix([[None, 4, 3], [None, None, -2], [None, None, None]])
# dist = johnson(G)
# dist[0][2]  # 2.0

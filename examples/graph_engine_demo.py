"""
Example: Directed graph engine in digraphkit

This example walks through the main operations of the package on a small
task-dependency network: building an immutable graph, converting it to
matrix and list forms, leveling it into a hierarchy, decomposing a cyclic
variant into strongly connected components and computing shortest paths
with Bellman-Ford, Dijkstra and Johnson.
"""

from digraphkit import (
    Graph,
    ValidationError,
    decompose,
    from_distance_matrix,
    hierarchy_levels,
    johnson,
    to_adjacency_matrix,
)


def example_construction():
    """Example: Immutable construction and no-op updates."""
    print("=" * 60)
    print("Example 1: Construction")
    print("=" * 60)

    G = Graph([0, 1, 2, 3], [(0, 1, 2), (0, 2, 5), (1, 2, 1), (2, 3, 2)])
    print(f"Graph: {G!r}")
    print(f"Adding an existing vertex returns the same object: {G.with_vertex(1) is G}")

    H = G.with_edge((3, 0, -1))
    print(f"Original edges: {len(G.edges)}, updated edges: {len(H.edges)}")
    print("Adjacency matrix:")
    for row in to_adjacency_matrix(G):
        print(f"  {row}")
    print()
    return G


def example_hierarchy(G):
    """Example: Leveling an acyclic dependency network."""
    print("=" * 60)
    print("Example 2: Hierarchy Levels")
    print("=" * 60)

    for depth, level in enumerate(hierarchy_levels(G)):
        print(f"Level {depth}: {level}")

    cyclic = G.with_edge((3, 0))
    try:
        hierarchy_levels(cyclic)
    except ValidationError as e:
        print(f"Cyclic graph rejected: {e}")
    print()


def example_decomposition():
    """Example: Strongly connected components and the condensation."""
    print("=" * 60)
    print("Example 3: Decomposition")
    print("=" * 60)

    G = Graph(range(6), [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (4, 5)])
    decomposition = decompose(G)
    print(f"Components: {decomposition.components}")
    print(f"Links: {[tuple(link) for link in decomposition.links]}")
    print(f"Condensation levels: {hierarchy_levels(decomposition.condensation())}")
    print()


def example_shortest_paths():
    """Example: Single-source and all-pairs shortest paths."""
    print("=" * 60)
    print("Example 4: Shortest Paths")
    print("=" * 60)

    G = from_distance_matrix(
        [
            [0, 3, 8, None],
            [None, 0, None, 1],
            [None, 4, 0, None],
            [2, None, -5, 0],
        ]
    )
    print(f"Bellman-Ford from 0: {G.bellman_ford(0)}")
    print(f"Dijkstra from 1 (on the non-negative part): {G.without_edge((3, 2)).dijkstra(1)}")

    distances = johnson(G)
    print("Johnson all-pairs distances:")
    for u in G.vertices:
        print(f"  {u}: {distances[u]}")
    print()


if __name__ == "__main__":
    graph = example_construction()
    example_hierarchy(graph)
    example_decomposition()
    example_shortest_paths()
    print("All examples completed.")

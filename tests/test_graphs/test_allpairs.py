"""Tests for Johnson's all-pairs shortest paths."""

import math

import pytest

from digraphkit.diagnostics import debug_context
from digraphkit.graphs import (
    Graph,
    ValidationError,
    bellman_ford,
    dijkstra,
    from_distance_matrix,
    johnson,
)
from digraphkit.graphs.allpairs import potentials, reweight, virtual_vertex


class TestJohnson:
    """Tests for johnson()."""

    def test_johnson_simple(self):
        """Test Johnson on a small weighted graph."""
        G = Graph([0, 1, 2], [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])

        dist = johnson(G)

        assert dist[0] == {0: 0.0, 1: 1.0, 2: 3.0}
        assert dist[1] == {0: math.inf, 1: 0.0, 2: 2.0}
        assert dist[2] == {0: math.inf, 1: math.inf, 2: 0.0}

    def test_negative_weights(self):
        """Test Johnson with negative weights and no negative cycle."""
        G = from_distance_matrix([
            [None, 4, 3, None],
            [None, None, -2, 1],
            [None, None, None, 2],
            [-1, None, None, None],
        ])

        dist = johnson(G)

        assert dist[0][2] == 2.0  # 0->1->2 = 4 - 2
        assert dist[0][3] == 4.0  # 0->1->2->3 = 4 - 2 + 2
        assert dist[3][2] == 1.0  # 3->0->1->2 = -1 + 4 - 2
        assert dist[1][0] == -1.0  # 1->2->3->0 = -2 + 2 - 1

    def test_matches_bellman_ford_with_negative_weights(self, random_graph, rng):
        """Test that recovered distances equal Bellman-Ford from every source."""
        for _ in range(5):
            base = random_graph(7, density=0.4)
            # w + p(u) - p(v) keeps every cycle's total equal to the base total
            p = {v: int(rng.integers(-10, 10)) for v in base.vertices}
            G = Graph(
                base.vertices,
                [(e.source, e.target, e.weight + p[e.source] - p[e.target]) for e in base.edges],
            )
            dist = johnson(G)
            for v in G.vertices:
                assert dist[v] == pytest.approx(bellman_ford(G, v))

    def test_matches_dijkstra_on_non_negative(self, random_graph):
        """Test that Johnson equals per-source Dijkstra on non-negative graphs."""
        for _ in range(5):
            G = random_graph(8)
            dist = johnson(G)
            for v in G.vertices:
                assert dist[v] == pytest.approx(dijkstra(G, v))

    def test_negative_cycle(self):
        """Test that a negative cycle raises ValidationError."""
        G = Graph([0, 1, 2], [(0, 1, 1.0), (1, 2, -3.0), (2, 1, 1.0)])
        with pytest.raises(ValidationError, match="negative-weight cycle"):
            johnson(G)

    def test_negative_cycle_anywhere(self):
        """Test that a negative cycle is found even if few vertices reach it."""
        G = Graph([0, 1, 2, 3], [(0, 1, 1), (2, 3, -2), (3, 2, 1)])
        with pytest.raises(ValidationError):
            johnson(G)

    def test_empty_graph(self):
        """Test that an empty graph yields no distances."""
        assert johnson(Graph()) == {}

    def test_unweighted_graph(self, path_graph):
        """Test that unweighted edges count as 1."""
        assert johnson(path_graph)[0] == {0: 0.0, 1: 1.0, 2: 2.0}

    def test_sparse_vertex_ids(self):
        """Test graphs whose ids are not 0..n-1."""
        G = Graph([10, -4, 7], [(10, -4, 2), (-4, 7, -1)])
        assert johnson(G)[10] == {10: 0.0, -4: 2.0, 7: 1.0}

    def test_debug_mode_passes(self):
        """Test that the debug-mode invariant checks accept a valid run."""
        G = Graph([0, 1, 2], [(0, 1, 0.1), (1, 2, -0.3), (0, 2, 0.2)])
        with debug_context(True):
            dist = johnson(G)
        assert dist[0][2] == pytest.approx(-0.2)

    def test_method_matches_function(self, cycle_with_tails):
        """Test that the Graph method delegates to johnson."""
        assert cycle_with_tails.johnson() == johnson(cycle_with_tails)


class TestHelpers:
    """Tests for the Johnson building blocks."""

    def test_virtual_vertex_is_new(self):
        """Test that the virtual vertex does not collide with existing ids."""
        G = Graph([3, -8, 12], [])
        assert virtual_vertex(G) not in G.vertices
        assert virtual_vertex(Graph()) == 0

    def test_reweighted_edges_non_negative(self):
        """Test that reweighting removes negative weights."""
        G = Graph([0, 1, 2], [(0, 1, 4), (1, 2, -2), (0, 2, 3)])
        h = potentials(G)
        assert h == {0: 0.0, 1: 0.0, 2: -2.0}
        assert all(e.weight >= 0 for e in reweight(G, h).edges)

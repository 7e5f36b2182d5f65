"""Tests for reachability search."""

import itertools

import pytest

from digraphkit.graphs import (
    Graph,
    ValidationError,
    ancestors,
    breadth_first_path,
    depth_first_path,
    descendants,
)

SEARCHES = [depth_first_path, breadth_first_path]


@pytest.mark.parametrize("search", SEARCHES)
class TestPathSearch:
    """Tests shared by DFS and BFS."""

    def test_simple_path(self, search, path_graph):
        """Test a path along the edges."""
        assert search(path_graph, 0, 2)
        assert search(path_graph, 0, 1)

    def test_direction_matters(self, search, path_graph):
        """Test that edges are not followed backwards."""
        assert not search(path_graph, 2, 0)

    def test_vertex_reaches_itself(self, search, path_graph):
        """Test the empty path."""
        assert search(path_graph, 2, 2)

    def test_cycle_safe(self, search, cycle_with_tails):
        """Test that searching a cyclic graph terminates."""
        assert search(cycle_with_tails, 1, 6)
        assert search(cycle_with_tails, 4, 2)
        assert not search(cycle_with_tails, 1, 0)

    def test_disconnected(self, search):
        """Test that isolated vertices are unreachable."""
        G = Graph([0, 1, 2], [(0, 1)])
        assert not search(G, 0, 2)
        assert not search(G, 2, 0)

    def test_missing_vertex(self, search, path_graph):
        """Test that absent endpoints raise ValidationError."""
        with pytest.raises(ValidationError):
            search(path_graph, 0, 9)
        with pytest.raises(ValidationError):
            search(path_graph, 9, 0)


def test_dfs_and_bfs_agree(cycle_with_tails, layered_dag):
    """Test that both searches give the same answer for every pair."""
    for G in (cycle_with_tails, layered_dag):
        for u, v in itertools.product(G.vertices, repeat=2):
            assert depth_first_path(G, u, v) == breadth_first_path(G, u, v)


class TestClosures:
    """Tests for descendants / ancestors."""

    def test_descendants(self, layered_dag):
        """Test reachable set on a DAG."""
        assert descendants(layered_dag, 3) == {4, 5, 6}
        assert descendants(layered_dag, 6) == set()

    def test_ancestors(self, layered_dag):
        """Test reaching set on a DAG."""
        assert ancestors(layered_dag, 3) == {0, 1, 2}
        assert ancestors(layered_dag, 0) == set()

    def test_vertex_on_cycle_includes_itself(self, cycle_with_tails):
        """Test that a vertex on a cycle is its own descendant."""
        assert descendants(cycle_with_tails, 1) == {1, 2, 3, 4, 5, 6, 7}
        assert ancestors(cycle_with_tails, 1) == {0, 1, 2, 3, 4}

    def test_missing_vertex(self, path_graph):
        """Test that an absent vertex raises ValidationError."""
        with pytest.raises(ValidationError):
            descendants(path_graph, 7)

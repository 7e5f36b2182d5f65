"""Pytest configuration and shared fixtures for digraphkit tests.

This module provides:
- A deterministic numpy RNG for randomized graph checks
- The recurring example graphs used across the graph test modules
- Isolation of the global debug-mode switch between tests
"""

import os

import numpy as np
import pytest

from digraphkit.diagnostics import is_debug_enabled, set_debug_enabled
from digraphkit.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Restore the global debug-mode switch after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def path_graph() -> Graph:
    """0 -> 1 -> 2."""
    return Graph([0, 1, 2], [(0, 1), (1, 2)])


@pytest.fixture
def layered_dag() -> Graph:
    """DAG with levels [[0], [1, 2], [3], [4], [5], [6]]."""
    return Graph(
        [0, 1, 2, 3, 4, 5, 6],
        [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5), (5, 6)],
    )


@pytest.fixture
def cycle_with_tails() -> Graph:
    """4-vertex cycle 1 -> 2 -> 3 -> 4 -> 1 with three acyclic tails.

    Tails: 0 -> 1 (into the cycle), 3 -> 5 -> 6 (out of the cycle) and
    4 -> 7 plus 2 -> 7 (two edges onto the same vertex).
    """
    return Graph(
        [0, 1, 2, 3, 4, 5, 6, 7],
        [
            (0, 1),
            (1, 2),
            (2, 3),
            (3, 4),
            (4, 1),
            (3, 5),
            (5, 6),
            (4, 7),
            (2, 7),
        ],
    )


@pytest.fixture
def random_graph(rng: np.random.Generator):
    """Factory for random weighted digraphs on 0..n-1 without self-loops."""

    def make(n: int, density: float = 0.3, low: int = 0, high: int = 10) -> Graph:
        edges = []
        for i in range(n):
            for j in range(n):
                if i != j and rng.random() < density:
                    edges.append((i, j, int(rng.integers(low, high))))
        return Graph(list(range(n)), edges)

    return make

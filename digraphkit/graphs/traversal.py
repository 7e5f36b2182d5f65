"""
Reachability search: depth-first and breadth-first.

Both searches answer the same question (is there a directed path from one
vertex to another?) and never revisit a vertex, so they terminate on cyclic
graphs. A vertex always reaches itself through the empty path.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Callable, List, Set

from .core import Graph, Vertex


def depth_first_path(graph: Graph, source: Vertex, target: Vertex) -> bool:
    """
    Depth-first search for a directed path (iterative, explicit stack).

    Args:
        graph: Graph to search.
        source: Start vertex.
        target: Vertex to look for.

    Returns:
        True iff target is reachable from source.

    Raises:
        ValidationError: If source or target is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph([0, 1, 2], [(0, 1), (1, 2)])
        >>> depth_first_path(G, 0, 2)
        True
        >>> depth_first_path(G, 2, 0)
        False
    """
    # validates both endpoints
    graph.index_of(source)
    graph.index_of(target)
    if source == target:
        return True

    visited: Set[Vertex] = {source}
    stack: List[Vertex] = [source]

    while stack:
        u = stack.pop()
        # Push in reverse so neighbors are explored in edge order
        for v in reversed(graph.successors(u)):
            if v == target:
                return True
            if v not in visited:
                visited.add(v)
                stack.append(v)

    return False


def breadth_first_path(graph: Graph, source: Vertex, target: Vertex) -> bool:
    """
    Breadth-first search for a directed path (FIFO queue).

    Same contract as depth_first_path.

    Complexity: O(V + E).
    """
    # validates both endpoints
    graph.index_of(source)
    graph.index_of(target)
    if source == target:
        return True

    visited: Set[Vertex] = {source}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.successors(u):
            if v == target:
                return True
            if v not in visited:
                visited.add(v)
                queue.append(v)

    return False


def _closure(start: Vertex, step: Callable[[Vertex], List[Vertex]]) -> Set[Vertex]:
    found: Set[Vertex] = set()
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v in step(u):
            if v not in found:
                found.add(v)
                queue.append(v)

    return found


def descendants(graph: Graph, vertex: Vertex) -> Set[Vertex]:
    """
    Return every vertex reachable from vertex by a non-empty path.

    vertex itself is included only when it lies on a cycle.

    Raises:
        ValidationError: If vertex is not in the graph.
    """
    graph.index_of(vertex)
    return _closure(vertex, graph.successors)


def ancestors(graph: Graph, vertex: Vertex) -> Set[Vertex]:
    """
    Return every vertex from which vertex is reachable by a non-empty path.

    Raises:
        ValidationError: If vertex is not in the graph.
    """
    graph.index_of(vertex)
    return _closure(vertex, graph.predecessors)

"""
Decomposition into strongly connected components.

For each vertex v not yet assigned, the component of v is the set of vertices
that v reaches and that reach v (mutual reachability). Components are
extracted as induced subgraphs in the order their first vertex appears in
graph.vertices. Edges between two different components are collapsed into
deduplicated links between component indices (the condensation).

This is O(V * (V + E)), which suits small hand-entered graphs.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Set, Tuple

from digraphkit.logging import get_logger

from .core import Graph, Vertex
from .errors import ValidationError
from .traversal import ancestors, descendants

logger = get_logger(__name__)


class ComponentLink(NamedTuple):
    """Directed link between two components, by component index."""

    source: int
    target: int


@dataclass(frozen=True)
class Decomposition:
    """
    Result of decompose().

    Attributes:
        components: Component subgraphs, in extraction order.
        links: Deduplicated inter-component links, in order of first occurrence
            among the original edges.
    """

    components: Tuple[Graph, ...]
    links: Tuple[ComponentLink, ...]

    def component_of(self, vertex: Vertex) -> int:
        """
        Return the index of the component containing vertex.

        Raises:
            ValidationError: If vertex belongs to no component.
        """
        for index, component in enumerate(self.components):
            if vertex in component:
                return index
        raise ValidationError(f"Vertex {vertex} not found in graph")

    def condensation(self) -> Graph:
        """Return the links as a graph over component indices (always acyclic)."""
        return Graph(list(range(len(self.components))), list(self.links))


def strongly_connected_sets(graph: Graph) -> List[List[Vertex]]:
    """
    Return the vertex sets of the strongly connected components.

    Each set lists its vertices in graph.vertices order.
    """
    assigned: Set[Vertex] = set()
    components: List[List[Vertex]] = []

    for v in graph.vertices:
        if v in assigned:
            continue
        reach = descendants(graph, v) | {v}
        reached_by = ancestors(graph, v) | {v}
        members = reach & reached_by
        components.append([u for u in graph.vertices if u in members])
        assigned |= members

    return components


def decompose(graph: Graph) -> Decomposition:
    """
    Decompose graph into strongly connected components plus condensation links.

    Args:
        graph: Graph to decompose. An empty graph yields no components.

    Returns:
        Decomposition with component subgraphs and inter-component links.

    Example:
        >>> G = Graph([0, 1, 2], [(0, 1), (1, 0), (1, 2)])
        >>> result = decompose(G)
        >>> [c.vertices for c in result.components]
        [(0, 1), (2,)]
        >>> result.links
        (ComponentLink(source=0, target=1),)
    """
    sets = strongly_connected_sets(graph)

    owner: Dict[Vertex, int] = {}
    for index, members in enumerate(sets):
        for v in members:
            owner[v] = index

    links: List[ComponentLink] = []
    seen: Set[ComponentLink] = set()
    for edge in graph.edges:
        link = ComponentLink(owner[edge.source], owner[edge.target])
        if link.source != link.target and link not in seen:
            seen.add(link)
            links.append(link)

    logger.debug(
        "Decomposed %d vertices into %d components with %d links",
        len(graph.vertices),
        len(sets),
        len(links),
    )
    return Decomposition(
        components=tuple(graph.subgraph(members) for members in sets),
        links=tuple(links),
    )

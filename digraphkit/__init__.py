"""digraphkit - an immutable directed-graph engine with classical algorithms."""

__version__ = "0.1.0"

# Graph engine
from .graphs import (
    ArgumentError,
    ComponentLink,
    Decomposition,
    Edge,
    Graph,
    GraphError,
    ValidationError,
    ancestors,
    bellman_ford,
    breadth_first_path,
    decompose,
    depth_first_path,
    descendants,
    dijkstra,
    from_adjacency_matrix,
    from_distance_matrix,
    from_incidence_list,
    hierarchy_levels,
    johnson,
    renumber_by_levels,
    to_adjacency_list,
    to_adjacency_matrix,
    to_incidence_list,
    to_incidence_matrix,
)

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# I/O
from .io import (
    dump_json_graph,
    dumps_graph,
    graph_to_json,
    json_to_graph,
    load_json_graph,
    loads_graph,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph engine
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
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # I/O
    "graph_to_json",
    "json_to_graph",
    "dumps_graph",
    "loads_graph",
    "dump_json_graph",
    "load_json_graph",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]

"""
Exceptions raised by the graph engine.

Two kinds of failure are distinguished:

- ArgumentError: the input has the wrong shape or type (a matrix that is not
  square, a vertex that is not an integer, unparsable JSON). Detected before
  any graph is built.
- ValidationError: the input is well-formed but violates a graph invariant or
  an algorithm's precondition (an edge to an unknown vertex, a cycle facing
  hierarchy leveling, a negative-weight cycle facing Bellman-Ford).

Both derive from ValueError so callers that already guard against bad values
keep working.
"""


class GraphError(ValueError):
    """Base class for all graph engine errors."""


class ArgumentError(GraphError):
    """Structurally malformed input passed to a constructor or converter."""


class ValidationError(GraphError):
    """Well-formed input that violates a graph invariant or precondition."""

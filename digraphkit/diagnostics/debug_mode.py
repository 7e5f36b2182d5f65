"""
Debug switch for the shortest-path engine.

Dijkstra and the reweighted phase of Johnson trust the caller to supply
non-negative weights. Scanning every edge for that costs O(E) per call, so the
scan runs only while debug mode is on. The switch starts from the
``DIGRAPHKIT_DEBUG`` environment variable and can be flipped at runtime or for
a single block.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterable, Iterator

DEBUG_ENV_VAR = "DIGRAPHKIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


_enabled = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return True while precondition checks are active."""
    return _enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn precondition checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state of the switch.
    """
    global _enabled
    _enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set the switch for the duration of a ``with`` block.

    The previous state comes back when the block exits, also when it raises,
    so contexts nest.

    Example
    -------
    >>> with debug_context():
    ...     dijkstra(graph, 0)  # a negative weight now raises ValidationError
    """
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    try:
        yield
    finally:
        _enabled = previous


def check_non_negative_weights(edges: Iterable, algorithm: str) -> None:
    """
    Raise if any edge has a negative effective weight, when debug mode is on.

    Parameters
    ----------
    edges:
        Edges to scan (anything with ``source``, ``target`` and
        ``effective_weight``).
    algorithm:
        Name used in the error message.

    Raises
    ------
    ValidationError
        If debug mode is on and a negative weight is found.
    """
    if not _enabled:
        return
    # graphs imports this module, so resolve the error type at call time
    from digraphkit.graphs.errors import ValidationError

    for edge in edges:
        if edge.effective_weight < 0:
            raise ValidationError(
                f"{algorithm} requires non-negative weights. Found weight "
                f"{edge.effective_weight} on edge ({edge.source}, {edge.target})"
            )

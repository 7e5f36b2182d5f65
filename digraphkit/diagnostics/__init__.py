"""Diagnostics and debugging switches for digraphkit."""

from .debug_mode import (
    DEBUG_ENV_VAR,
    check_non_negative_weights,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "DEBUG_ENV_VAR",
    "check_non_negative_weights",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

"""CLI commands for Deconstructor."""

from . import (
    deconstruct,
    validate,
    graph,
    config,
    models,
)

__all__ = [
    "deconstruct",
    "validate",
    "graph",
    "config",
    "models",
]

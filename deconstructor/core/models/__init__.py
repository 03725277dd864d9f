"""Data models for Deconstructor.

This package contains the Pydantic models used across the system:
- decomposition.py: word parts, combinations, decomposition records
- graph.py: nodes and edges exported for visualization
"""

from .decomposition import (
    # Nodes
    WordPart,
    Combination,
    # Record
    DecompositionRecord,
    AttemptRecord,
    # Constants
    DEFAULT_DECOMPOSITION,
    DECOMPOSITION_SCHEMA,
)
from .graph import (
    NodeKind,
    GraphNode,
    GraphEdge,
    DecompositionGraph,
)

__all__ = [
    # Nodes
    "WordPart",
    "Combination",
    # Record
    "DecompositionRecord",
    "AttemptRecord",
    # Constants
    "DEFAULT_DECOMPOSITION",
    "DECOMPOSITION_SCHEMA",
    # Graph
    "NodeKind",
    "GraphNode",
    "GraphEdge",
    "DecompositionGraph",
]

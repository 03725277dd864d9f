"""Decomposition layer for Deconstructor.

Turns a word into a validated DecompositionRecord by calling an LLM,
checking the result structurally, and retrying with the violations fed
back into the next instruction.

Pipeline:
    Step 0: normalize_word() - Trim and reject multi-word selections
    Step 1: build_instruction() - Rules plus feedback from failed attempts
    Step 2: produce_decomposition() - Bounded generate/validate loop
    Step 3: build_graph() - Nodes and edges for the rendering layer
"""

from .prompts import SYSTEM_INSTRUCTION, build_instruction, build_feedback
from .orchestrator import (
    AttemptCallback,
    DecompositionExhaustedError,
    OrchestratorState,
    produce_decomposition,
)
from .service import deconstruct_word, normalize_word
from .graph import build_graph

__all__ = [
    "SYSTEM_INSTRUCTION",
    "build_instruction",
    "build_feedback",
    "AttemptCallback",
    "DecompositionExhaustedError",
    "OrchestratorState",
    "produce_decomposition",
    "deconstruct_word",
    "normalize_word",
    "build_graph",
]

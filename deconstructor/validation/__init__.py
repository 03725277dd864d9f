"""Validator module for Deconstructor decompositions.

Validates candidate records before they are accepted. All checks are
structural - no LLM calls and no side effects.

Module structure:
- structural.py: coverage, id uniqueness, terminal layer, DAG closure
"""

from ..core.models import DecompositionRecord

from .structural import (
    validate_parts_cover_word,
    validate_unique_ids,
    validate_terminal_layer,
    validate_dag_closure,
    run_structural_checks,
)


def validate_decomposition(word: str, record: DecompositionRecord) -> list[str]:
    """
    Validate a DecompositionRecord against the word it should spell.

    Runs all checks independently and returns every violation found.
    An empty list means the record is valid.

    Args:
        word: The single word being decomposed
        record: Candidate decomposition, possibly incomplete

    Returns:
        List of human-readable violation messages

    Example:
        >>> violations = validate_decomposition("deconstructor", record)
        >>> for message in violations:
        ...     print(f"ERROR: {message}")
    """
    return run_structural_checks(word, record)


def format_violations(violations: list[str]) -> str:
    """Render violations as a bullet list, one per line."""
    return "\n".join(f"- {message}" for message in violations)


__all__ = [
    "validate_decomposition",
    "format_violations",
    "validate_parts_cover_word",
    "validate_unique_ids",
    "validate_terminal_layer",
    "validate_dag_closure",
    "run_structural_checks",
]

"""Instruction text for decomposition generation."""

import json

from ..core.models import AttemptRecord
from ..validation import format_violations


SYSTEM_INSTRUCTION = """You are a linguistic expert that deconstructs words into their meaningful parts and explains their etymology. Create multiple layers of combinations to form the final meaning of the word.

Schema Requirements:
- thought: The reasoning behind the word's etymology and how it's constructed
- parts: An array of word parts that MUST combine to form the original word
  - id: Unique identifier for the word part (simple, lowercase, no spaces)
  - text: The EXACT section of text from the original word
  - originalWord: The oldest form this part derives from
  - origin: Brief origin language (e.g., "Latin", "Greek")
  - meaning: The meaning of this part in its original language
- combinations: A directed acyclic graph showing how parts combine
  - Each array is a single layer in the graph
  - Each combination contains:
    - id: Unique identifier (cannot repeat part IDs)
    - text: The combined text
    - definition: Definition of the combined parts
    - sourceIds: Array of IDs of parts or combinations that form this
  - The last layer MUST have exactly one combination matching the full word

If the word has no clear etymology:
1. Still break it into phonetic or meaningful segments
2. Include at least one part
3. Always include at least one combination layer
4. Make sure the final combination is the original word

IMPORTANT: Ensure that:
1. Parts combine exactly to form the original word, no extra or missing letters
2. IDs are unique across all parts and combinations
3. Every node (except the final word) is used exactly once as a source
4. The final layer has exactly one node representing the full word
5. All sourceIds reference existing parts or combinations from earlier layers"""


def build_feedback(history: list[AttemptRecord]) -> str:
    """Transcript of every failed attempt followed by its violations."""
    lines = ["Previous attempts:"]
    for idx, entry in enumerate(history, start=1):
        lines.append(f"Attempt {idx}:")
        lines.append(json.dumps(entry.candidate.to_wire(), indent=2))
        lines.append("Errors:")
        lines.append(format_violations(entry.violations))
    lines.append("")
    lines.append("Please fix all the issues and try again.")
    return "\n".join(lines)


def build_instruction(word: str, history: list[AttemptRecord] | None = None) -> str:
    """Full instruction for one attempt: rules, the word, and prior feedback."""
    prompt = f"{SYSTEM_INSTRUCTION}\n\n---\n\nAnalyze the word: {word}"
    if history:
        prompt = f"{prompt}\n\n{build_feedback(history)}"
    return prompt

"""Structural checks for decomposition records.

Every check is pure: it reads the record and returns a list of
human-readable violations. The messages are replayed verbatim to the
generator as correction instructions, so they name the exact ids, texts
and layers involved.
"""

from ..core.models import DecompositionRecord, WordPart


def _normalize(text: str) -> str:
    return text.casefold()


def validate_parts_cover_word(word: str, parts: list[WordPart]) -> list[str]:
    """Parts, concatenated in order, must spell the word (spaces removed)."""
    combined = "".join(part.text for part in parts)
    target = word.replace(" ", "")

    if _normalize(combined) != _normalize(target):
        listed = ", ".join(part.text for part in parts)
        return [f'The parts "{listed}" do not combine to form the word "{word}"']
    return []


def validate_unique_ids(record: DecompositionRecord) -> list[str]:
    """Every id across parts and all combination layers must be unique."""
    errors = []
    first_seen: dict[str, str] = {}

    def check(node_id: str, location: str) -> None:
        if node_id in first_seen:
            errors.append(
                f'ID "{node_id}" in {location} is already used in '
                f"{first_seen[node_id]}. IDs must be unique across both "
                f"parts and combinations."
            )
        else:
            first_seen[node_id] = location

    for part in record.parts:
        check(part.id, "parts")

    for layer_index, layer in enumerate(record.combinations, start=1):
        for combo in layer:
            check(combo.id, f"combinations layer {layer_index}")

    return errors


def validate_terminal_layer(word: str, record: DecompositionRecord) -> list[str]:
    """The last layer must hold exactly one combination spelling the word."""
    last_layer = record.combinations[-1] if record.combinations else []

    if len(last_layer) != 1:
        return [
            "The last layer should have exactly one item, which should be "
            f"the original word, but you have {len(last_layer)} items."
        ]

    final_text = _normalize(record.final_combination.text)
    if final_text != _normalize(word):
        return [
            f'The final combination "{final_text}" does not match the input word "{word}"'
        ]
    return []


def validate_dag_closure(record: DecompositionRecord) -> list[str]:
    """Sources must resolve to parts or combinations from strictly earlier layers."""
    errors = []
    defined = {part.id for part in record.parts}

    for layer in record.combinations:
        for combo in layer:
            for source_id in combo.source_ids:
                if source_id not in defined:
                    errors.append(
                        f'The sourceId "{source_id}" in combination "{combo.id}" '
                        f"does not exist in previous layers."
                    )
        # Layer ids become visible only to later layers
        defined.update(combo.id for combo in layer)

    return errors


def run_structural_checks(word: str, record: DecompositionRecord) -> list[str]:
    """Run every check and collect all violations in a stable order."""
    return [
        *validate_parts_cover_word(word, record.parts),
        *validate_unique_ids(record),
        *validate_terminal_layer(word, record),
        *validate_dag_closure(record),
    ]

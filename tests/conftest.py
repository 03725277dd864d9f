"""Global fixtures for Deconstructor tests."""

import pytest

from deconstructor.core.models import (
    Combination,
    DecompositionRecord,
    WordPart,
)


def make_part(part_id, text=None):
    """Build a WordPart with placeholder etymology."""
    return WordPart(
        id=part_id,
        text=text if text is not None else part_id,
        original_word=part_id,
        origin="Latin",
        meaning="",
    )


def make_combo(combo_id, source_ids, text=None):
    return Combination(
        id=combo_id,
        text=text if text is not None else combo_id,
        definition="",
        source_ids=source_ids,
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config reads/writes and request logs inside a temp dir."""
    monkeypatch.setenv("DECONSTRUCTOR_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    return tmp_path / "config"


@pytest.fixture
def valid_record():
    """Valid decomposition of 'deconstructor'."""
    return DecompositionRecord(
        thought="de- + construct + -or",
        parts=[
            make_part("de"),
            make_part("construc"),
            make_part("tor"),
        ],
        combinations=[
            [make_combo("constructor", ["construc", "tor"])],
            [make_combo("deconstructor", ["de", "constructor"])],
        ],
    )


@pytest.fixture
def truncated_record(valid_record):
    """Same as valid_record but the final node drops the '-or'."""
    final = valid_record.combinations[-1][0].model_copy(update={"text": "deconstruct"})
    return valid_record.model_copy(
        update={"combinations": [valid_record.combinations[0], [final]]}
    )


@pytest.fixture
def wire_record():
    """Raw camelCase JSON as an LLM would return it."""
    return {
        "thought": "",
        "parts": [
            {"id": "tele", "text": "tele", "originalWord": "tēle", "origin": "Greek", "meaning": "far"},
            {"id": "phone", "text": "phone", "originalWord": "phōnē", "origin": "Greek", "meaning": "sound"},
        ],
        "combinations": [
            [
                {
                    "id": "telephone",
                    "text": "telephone",
                    "definition": "device carrying sound far",
                    "sourceIds": ["tele", "phone"],
                }
            ]
        ],
    }

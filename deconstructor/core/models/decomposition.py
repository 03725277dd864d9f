"""Pydantic models for word decompositions.

A decomposition breaks a word into etymological parts and then merges those
parts, layer by layer, back into the original word. Parts and combinations
together form a DAG whose single terminal node is the word itself.

Field names are snake_case in Python; the wire format (LLM responses, saved
JSON, feedback transcripts) uses the camelCase aliases.
"""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class WordPart(_WireModel):
    """One atomic etymological fragment of the input word."""

    id: str
    text: str = Field(description="Exact section of the input word")
    original_word: str = Field(alias="originalWord")
    origin: str = "Unknown"
    meaning: str = ""


class Combination(_WireModel):
    """A node merging earlier parts or combinations."""

    id: str
    text: str
    definition: str = ""
    source_ids: list[str] = Field(default_factory=list, alias="sourceIds")


class DecompositionRecord(_WireModel):
    """Full structured result for one word."""

    thought: str = ""
    parts: list[WordPart] = Field(default_factory=list)
    combinations: list[list[Combination]] = Field(default_factory=list)

    @property
    def final_combination(self) -> Combination | None:
        if not self.combinations or len(self.combinations[-1]) != 1:
            return None
        return self.combinations[-1][0]

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class AttemptRecord(BaseModel):
    """One failed validation attempt kept for feedback."""

    candidate: DecompositionRecord
    violations: list[str]


DEFAULT_DECOMPOSITION = DecompositionRecord(
    thought="",
    parts=[
        WordPart(
            id="de",
            text="de",
            original_word="de-",
            origin="Latin",
            meaning="down, off, away",
        ),
        WordPart(
            id="construc",
            text="construc",
            original_word="construere",
            origin="Latin",
            meaning="to build, to pile up",
        ),
        WordPart(
            id="tor",
            text="tor",
            original_word="-or",
            origin="Latin",
            meaning="agent noun, one who does an action",
        ),
    ],
    combinations=[
        [
            Combination(
                id="constructor",
                text="constructor",
                definition="one who constructs or builds",
                source_ids=["construc", "tor"],
            )
        ],
        [
            Combination(
                id="deconstructor",
                text="deconstructor",
                definition="one who takes apart or analyzes the construction of something",
                source_ids=["de", "constructor"],
            )
        ],
    ],
)


# JSON Schema for structured-output providers. Strict mode requires every
# property to be listed as required and no additional properties.
DECOMPOSITION_SCHEMA = {
    "type": "object",
    "properties": {
        "thought": {
            "type": "string",
            "description": "The reasoning behind the word's etymology and how it's constructed",
        },
        "parts": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "text": {"type": "string"},
                    "originalWord": {"type": "string"},
                    "origin": {"type": "string"},
                    "meaning": {"type": "string"},
                },
                "required": ["id", "text", "originalWord", "origin", "meaning"],
                "additionalProperties": False,
            },
        },
        "combinations": {
            "type": "array",
            "items": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string"},
                        "text": {"type": "string"},
                        "definition": {"type": "string"},
                        "sourceIds": {
                            "type": "array",
                            "items": {"type": "string"},
                        },
                    },
                    "required": ["id", "text", "definition", "sourceIds"],
                    "additionalProperties": False,
                },
            },
        },
    },
    "required": ["thought", "parts", "combinations"],
    "additionalProperties": False,
}

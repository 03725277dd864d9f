"""Abstract base class for LLM providers."""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from ..models import DecompositionRecord


# Type for generation capabilities: (word, instruction) -> candidate record
GenerationCapability = Callable[[str, str], DecompositionRecord]

# Type for retry notification callbacks: (attempt, max_attempts, short_error_summary)
RetryCallback = Callable[[int, int, str], None]


class GenerationError(Exception):
    """The generation capability failed to produce a parseable record.

    Covers transport faults (network, auth, rate limits) and responses
    that do not match the decomposition schema.
    """


def _get_logs_dir() -> Path:
    """Get logs directory, create if needed."""
    logs_dir = Path("./logs")
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def log_request_response(
    provider: str,
    function_name: str,
    request: dict,
    response: Any,
) -> None:
    """Log full request and response to a JSON file."""
    logs_dir = _get_logs_dir()
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    log_file = logs_dir / f"{timestamp}_{provider}_{function_name}.json"

    # Convert response to dict if possible
    if hasattr(response, "model_dump"):
        try:
            response_dict = response.model_dump(mode="json", warnings=False)
        except Exception:
            response_dict = str(response)
    else:
        response_dict = str(response)

    log_data = {
        "timestamp": datetime.now().isoformat(),
        "function": function_name,
        "provider": provider,
        "request": request,
        "response": response_dict,
    }

    with open(log_file, "w") as f:
        json.dump(log_data, f, indent=2, default=str)


def parse_record(data: dict | None) -> DecompositionRecord:
    """Validate raw structured output against the record schema.

    Raises:
        GenerationError: If the response is empty or does not match the schema
    """
    if not data:
        raise GenerationError("Model returned no structured output")
    try:
        return DecompositionRecord.model_validate(data)
    except ValidationError as e:
        raise GenerationError(f"Model output does not match schema: {e}") from e


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    All providers must implement these methods with the same signatures
    to ensure drop-in compatibility. A bound ``generate`` method is a
    GenerationCapability.

    Args:
        api_key: API key or access token for the provider.
    """

    name: str = "base"

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model for word decomposition."""
        ...

    @abstractmethod
    def generate(
        self,
        word: str,
        instruction: str,
        model: str | None = None,
        log: bool = True,
    ) -> DecompositionRecord:
        """Produce one candidate decomposition for a word.

        Raises:
            GenerationError: On transport failure or schema mismatch
        """
        ...

    def capability(self, model: str | None = None, log: bool = True) -> GenerationCapability:
        """Bind model selection so the provider fits the (word, instruction) contract."""

        def _generate(word: str, instruction: str) -> DecompositionRecord:
            return self.generate(word, instruction, model=model, log=log)

        return _generate

"""OpenAI LLM Provider implementation."""

import json
import logging
import time

import openai
from openai import OpenAI

from ..models import DECOMPOSITION_SCHEMA, DecompositionRecord
from .base import GenerationError, LLMProvider, log_request_response, parse_record


logger = logging.getLogger(__name__)


# Models offered in the settings picker, default first
AVAILABLE_MODELS = {
    "gpt-4o": "GPT-4o (Default)",
    "gpt-4o-mini": "GPT-4o Mini (Faster)",
    "gpt-4.5-preview": "GPT-4.5 Preview",
}


class OpenAIProvider(LLMProvider):
    """OpenAI LLM provider using the Responses API."""

    name = "openai"

    def __init__(self, api_key: str = "") -> None:
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY not found. Set it as an environment variable.\n"
                "  export OPENAI_API_KEY=sk-..."
            )
        super().__init__(api_key)

    @property
    def default_model(self) -> str:
        return "gpt-4o"

    def _get_client(self) -> OpenAI:
        return OpenAI(api_key=self._api_key)

    def generate(
        self,
        word: str,
        instruction: str,
        model: str | None = None,
        log: bool = True,
    ) -> DecompositionRecord:
        model = model or self.default_model
        client = self._get_client()

        request_params = {
            "model": model,
            "input": instruction,
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "WordEtymology",
                    "description": (
                        "A word broken down into its etymological parts "
                        "with layers of combinations"
                    ),
                    "strict": True,
                    "schema": DECOMPOSITION_SCHEMA,
                }
            },
        }

        logger.info(f"[LLM] generate starting - model={model}, word={word}")
        logger.info(f"[LLM] instruction length: {len(instruction)} chars")

        api_start = time.time()
        try:
            response = client.responses.create(**request_params)
        except openai.OpenAIError as e:
            raise GenerationError(f"OpenAI request failed: {e}") from e
        api_elapsed = time.time() - api_start

        logger.info(f"[LLM] API response received in {api_elapsed:.2f}s")

        if log:
            log_request_response(
                provider=self.name,
                function_name="generate",
                request=request_params,
                response=response,
            )

        # Extract structured data
        structured_data = None
        for item in response.output:
            if hasattr(item, "type") and item.type == "message":
                for content_item in item.content:
                    if (
                        hasattr(content_item, "type")
                        and content_item.type == "output_text"
                    ):
                        if hasattr(content_item, "text"):
                            try:
                                structured_data = json.loads(content_item.text)
                            except json.JSONDecodeError as e:
                                raise GenerationError(
                                    f"OpenAI returned invalid JSON: {e}"
                                ) from e

        return parse_record(structured_data)

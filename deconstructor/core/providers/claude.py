"""Claude (Anthropic) LLM Provider implementation."""

import json
import logging

import anthropic

from ..models import DECOMPOSITION_SCHEMA, DecompositionRecord
from .base import GenerationError, LLMProvider, log_request_response, parse_record


logger = logging.getLogger(__name__)


def _extract_json_from_text(text: str) -> dict | None:
    """Try to extract JSON from text, handling code blocks."""
    # Try direct parse first
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Try to find JSON in code block
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        if end > start:
            try:
                return json.loads(text[start:end].strip())
            except json.JSONDecodeError:
                pass

    if "```" in text:
        start = text.find("```") + 3
        # Skip language identifier if present
        newline = text.find("\n", start)
        if newline > start:
            start = newline + 1
        end = text.find("```", start)
        if end > start:
            try:
                return json.loads(text[start:end].strip())
            except json.JSONDecodeError:
                pass

    return None


class ClaudeProvider(LLMProvider):
    """Claude (Anthropic) LLM provider.

    Supports both API key (sk-ant-...) and OAuth access token authentication.
    """

    name = "claude"

    def __init__(self, api_key: str = "") -> None:
        if not api_key:
            raise ValueError(
                "Anthropic credentials not found. Set one of:\n"
                "  export ANTHROPIC_API_KEY=sk-ant-...       # API key\n"
                "  export ANTHROPIC_ACCESS_TOKEN=...         # OAuth token\n"
                "Get your key from: https://console.anthropic.com/settings/keys"
            )
        super().__init__(api_key)

    @property
    def default_model(self) -> str:
        return "claude-sonnet-4-5-20250929"

    def _is_oauth_token(self) -> bool:
        """Check if the credential is an OAuth access token (not an API key)."""
        return not self._api_key.startswith("sk-ant-")

    def _get_client(self) -> anthropic.Anthropic:
        if self._is_oauth_token():
            return anthropic.Anthropic(auth_token=self._api_key)
        return anthropic.Anthropic(api_key=self._api_key)

    def _build_json_prompt(self, instruction: str) -> str:
        """Add JSON schema instruction to prompt."""
        return (
            f"{instruction}\n\n"
            f"Respond with valid JSON matching this schema:\n"
            f"```json\n{json.dumps(DECOMPOSITION_SCHEMA, indent=2)}\n```\n"
            f"Return ONLY the JSON object, no other text."
        )

    def generate(
        self,
        word: str,
        instruction: str,
        model: str | None = None,
        log: bool = True,
    ) -> DecompositionRecord:
        model = model or self.default_model
        client = self._get_client()

        full_prompt = self._build_json_prompt(instruction)

        logger.info(f"[Claude] generate starting - model={model}, word={word}")

        try:
            response = client.messages.create(
                model=model,
                max_tokens=8192,
                messages=[{"role": "user", "content": full_prompt}],
            )
        except anthropic.AnthropicError as e:
            raise GenerationError(f"Anthropic request failed: {e}") from e

        if log:
            log_request_response(
                provider=self.name,
                function_name="generate",
                request={"model": model, "prompt_length": len(full_prompt)},
                response=response,
            )

        # Extract structured data from text response
        structured_data = None
        for block in response.content:
            if block.type == "text":
                structured_data = _extract_json_from_text(block.text)
                if structured_data:
                    break

        return parse_record(structured_data)

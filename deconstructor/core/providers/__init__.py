"""LLM providers that produce candidate decompositions.

Usage:
    provider = get_provider("openai", api_key)
    record = provider.generate(word, instruction)
"""

from .base import (
    GenerationCapability,
    GenerationError,
    LLMProvider,
    RetryCallback,
)


def get_provider(name: str, api_key: str) -> LLMProvider:
    """Create a provider by name ("openai" or "claude")."""
    if name == "openai":
        from .openai import OpenAIProvider

        return OpenAIProvider(api_key=api_key)
    if name == "claude":
        from .claude import ClaudeProvider

        return ClaudeProvider(api_key=api_key)
    raise ValueError(f"Unknown provider: {name!r}. Expected 'openai' or 'claude'.")


__all__ = [
    "GenerationCapability",
    "GenerationError",
    "LLMProvider",
    "RetryCallback",
    "get_provider",
]

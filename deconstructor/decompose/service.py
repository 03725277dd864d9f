"""Caller-facing entry point for word decomposition."""

from ..config import get_api_key, get_config
from ..core.models import DecompositionRecord
from ..core.providers import LLMProvider, RetryCallback, get_provider
from .orchestrator import AttemptCallback, produce_decomposition


def normalize_word(selection: str) -> str:
    """Trim a selection and make sure it is a single word.

    Raises:
        ValueError: If the selection is empty or has more than one word
    """
    word = selection.strip()
    if not word:
        raise ValueError("No word given.")
    if len(word.split()) != 1:
        raise ValueError("Only single words can be deconstructed.")
    return word


def deconstruct_word(
    word: str,
    api_key: str | None = None,
    retry_count: int = 0,
    model: str | None = None,
    provider: LLMProvider | str | None = None,
    max_attempts: int | None = None,
    on_attempt: AttemptCallback | None = None,
    on_retry: RetryCallback | None = None,
) -> DecompositionRecord:
    """Decompose a word using the configured provider.

    Args:
        word: Word to decompose; surrounding whitespace is trimmed
        api_key: Provider credential; read from the environment if omitted
        retry_count: Number of times the user has retried this request.
            Any value above zero enables the default-record fallback.
        model: Model name passed through to the provider
        provider: Provider instance or name; defaults to the configured one
        max_attempts: Attempt budget; defaults to the configured one

    Returns:
        DecompositionRecord, possibly best-effort if validation never passed
    """
    word = normalize_word(word)
    config = get_config()

    if not isinstance(provider, LLMProvider):
        provider_name = provider or config.llm.provider
        provider = get_provider(provider_name, api_key or get_api_key(provider_name))

    generate = provider.capability(
        model=model or config.llm.model,
        log=config.logging.log_requests,
    )

    return produce_decomposition(
        word,
        generate,
        max_attempts=config.retry.max_attempts if max_attempts is None else max_attempts,
        is_user_retry=retry_count > 0,
        on_attempt=on_attempt,
        on_retry=on_retry,
    )

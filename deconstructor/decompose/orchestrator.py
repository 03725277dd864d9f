"""Bounded, feedback-driven generation of valid decompositions.

The orchestrator turns an unreliable generator into a dependable one:

    Attempting -> Validating -> Accepted | Retrying | Exhausted

Each attempt's instruction carries the transcript of every earlier
candidate that failed validation, together with its violations. Transport
failures are retried but never transcribed. Once the attempt budget is
spent the fallback ladder decides the outcome:

    1. the most recent invalid candidate, if any was produced
    2. DEFAULT_DECOMPOSITION, if this is a user-initiated retry
    3. DecompositionExhaustedError

The orchestrator has no logging of its own; progress is reported through
the optional ``on_attempt`` and ``on_retry`` callbacks.
"""

from enum import Enum
from typing import Callable

from ..core.models import AttemptRecord, DecompositionRecord, DEFAULT_DECOMPOSITION
from ..core.providers import GenerationCapability, GenerationError, RetryCallback
from ..validation import validate_decomposition
from .prompts import build_instruction


class OrchestratorState(str, Enum):
    ATTEMPTING = "attempting"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    RETRYING = "retrying"
    EXHAUSTED = "exhausted"


# Type for state notification callbacks: (state, attempt, max_attempts)
AttemptCallback = Callable[[OrchestratorState, int, int], None]


class DecompositionExhaustedError(GenerationError):
    """Every attempt failed in transport and no fallback applied."""

    def __init__(self, word: str, attempts: int, last_error: Exception | None):
        self.word = word
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Failed to analyze '{word}' after {attempts} attempts: {last_error}"
        )


def _summarize(message: str) -> str:
    return message if len(message) <= 60 else message[:57] + "..."


def produce_decomposition(
    word: str,
    generate: GenerationCapability,
    max_attempts: int = 3,
    is_user_retry: bool = False,
    on_attempt: AttemptCallback | None = None,
    on_retry: RetryCallback | None = None,
) -> DecompositionRecord:
    """Generate a decomposition, retrying with validator feedback.

    Args:
        word: Word to decompose
        generate: Capability called as generate(word, instruction)
        max_attempts: Total attempt budget, transport failures included
        is_user_retry: Caller is retrying a previously failed request;
            enables the default-record fallback
        on_attempt: Optional callback for state transitions
        on_retry: Optional callback (attempt, max_attempts, summary) fired
            before each retry and once on exhaustion

    Returns:
        The first valid candidate, else the best-effort or default record

    Raises:
        DecompositionExhaustedError: All attempts failed in transport and
            is_user_retry is False
        ValueError: If max_attempts < 1
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    def notify(state: OrchestratorState) -> None:
        if on_attempt:
            on_attempt(state, attempt, max_attempts)

    history: list[AttemptRecord] = []
    last_error: GenerationError | None = None
    attempt = 0
    state = OrchestratorState.ATTEMPTING

    while state is not OrchestratorState.EXHAUSTED:
        attempt += 1
        notify(OrchestratorState.ATTEMPTING)
        instruction = build_instruction(word, history)

        try:
            candidate = generate(word, instruction)
        except GenerationError as e:
            last_error = e
            summary = _summarize(str(e))
        else:
            notify(OrchestratorState.VALIDATING)
            violations = validate_decomposition(word, candidate)
            if not violations:
                notify(OrchestratorState.ACCEPTED)
                return candidate
            history.append(AttemptRecord(candidate=candidate, violations=violations))
            summary = _summarize(violations[0])

        if attempt >= max_attempts:
            state = OrchestratorState.EXHAUSTED
        else:
            notify(OrchestratorState.RETRYING)
            if on_retry:
                on_retry(attempt, max_attempts, summary)

    notify(OrchestratorState.EXHAUSTED)
    if on_retry:
        on_retry(attempt, max_attempts, f"EXHAUSTED: {summary}")

    if history:
        return history[-1].candidate
    if is_user_retry:
        return DEFAULT_DECOMPOSITION.model_copy(deep=True)
    raise DecompositionExhaustedError(word, attempt, last_error) from last_error

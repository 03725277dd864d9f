"""Tests for the retry orchestrator."""

from unittest.mock import MagicMock

import pytest

from deconstructor.core.models import DEFAULT_DECOMPOSITION, DecompositionRecord
from deconstructor.core.providers import GenerationError
from deconstructor.decompose import (
    DecompositionExhaustedError,
    OrchestratorState,
    produce_decomposition,
)


class TestRetryLoop:
    """Tests for the generate/validate loop."""

    def test_accepts_first_valid(self, valid_record):
        generate = MagicMock(return_value=valid_record)

        result = produce_decomposition("deconstructor", generate)

        assert result is valid_record
        generate.assert_called_once()
        word, instruction = generate.call_args.args
        assert word == "deconstructor"
        assert "Analyze the word: deconstructor" in instruction
        assert "Previous attempts" not in instruction

    def test_converges_on_second_attempt(self, valid_record, truncated_record):
        """Invalid first, valid second: no third call."""
        generate = MagicMock(side_effect=[truncated_record, valid_record, valid_record])

        result = produce_decomposition("deconstructor", generate, max_attempts=3)

        assert result is valid_record
        assert generate.call_count == 2

    def test_feedback_contains_prior_candidate_and_errors(self, valid_record, truncated_record):
        generate = MagicMock(side_effect=[truncated_record, valid_record])

        produce_decomposition("deconstructor", generate)

        second_instruction = generate.call_args_list[1].args[1]
        assert "Previous attempts:" in second_instruction
        assert "Attempt 1:" in second_instruction
        assert '"text": "deconstruct"' in second_instruction
        assert (
            '- The final combination "deconstruct" does not match the input word "deconstructor"'
            in second_instruction
        )
        assert second_instruction.rstrip().endswith("Please fix all the issues and try again.")

    def test_feedback_accumulates(self, valid_record, truncated_record):
        generate = MagicMock(side_effect=[truncated_record, DecompositionRecord(), valid_record])

        produce_decomposition("deconstructor", generate)

        third_instruction = generate.call_args_list[2].args[1]
        assert "Attempt 1:" in third_instruction
        assert "Attempt 2:" in third_instruction
        assert "but you have 0 items" in third_instruction

    def test_invalid_max_attempts(self, valid_record):
        with pytest.raises(ValueError):
            produce_decomposition("deconstructor", MagicMock(return_value=valid_record), max_attempts=0)


class TestExhaustion:
    """Tests for the fallback ladder."""

    def test_returns_last_invalid_candidate(self, truncated_record):
        """Always-invalid generator: exactly max_attempts calls, no raise."""
        generate = MagicMock(return_value=truncated_record)

        result = produce_decomposition("deconstructor", generate, max_attempts=3)

        assert result is truncated_record
        assert generate.call_count == 3

    def test_returns_most_recent_candidate(self, truncated_record):
        empty = DecompositionRecord()
        generate = MagicMock(side_effect=[empty, truncated_record])

        result = produce_decomposition("deconstructor", generate, max_attempts=2)

        assert result is truncated_record

    def test_best_effort_wins_over_later_transport_failure(self, truncated_record):
        generate = MagicMock(side_effect=[truncated_record, GenerationError("boom"), GenerationError("boom")])

        result = produce_decomposition("deconstructor", generate, max_attempts=3)

        assert result is truncated_record
        assert generate.call_count == 3

    def test_transport_failures_raise(self):
        error = GenerationError("network down")
        generate = MagicMock(side_effect=error)

        with pytest.raises(DecompositionExhaustedError) as exc_info:
            produce_decomposition("deconstructor", generate, max_attempts=3)

        assert generate.call_count == 3
        assert exc_info.value.attempts == 3
        assert exc_info.value.last_error is error
        assert exc_info.value.__cause__ is error

    def test_transport_failures_on_user_retry_use_default(self):
        generate = MagicMock(side_effect=GenerationError("network down"))

        result = produce_decomposition(
            "anything", generate, max_attempts=2, is_user_retry=True
        )

        assert result == DEFAULT_DECOMPOSITION
        assert generate.call_count == 2

    def test_default_fallback_is_a_fresh_copy(self):
        """Changing one fallback result must not leak into the next."""
        generate = MagicMock(side_effect=GenerationError("network down"))

        first = produce_decomposition("anything", generate, max_attempts=1, is_user_retry=True)
        first.parts.append(first.parts[0])
        second = produce_decomposition("anything", generate, max_attempts=1, is_user_retry=True)

        assert first is not DEFAULT_DECOMPOSITION
        assert len(second.parts) == 3
        assert len(DEFAULT_DECOMPOSITION.parts) == 3

    def test_transport_failure_not_transcribed(self, valid_record):
        generate = MagicMock(side_effect=[GenerationError("timeout"), valid_record])

        result = produce_decomposition("deconstructor", generate)

        assert result is valid_record
        second_instruction = generate.call_args_list[1].args[1]
        assert "Previous attempts" not in second_instruction
        assert "timeout" not in second_instruction

    def test_other_exceptions_propagate(self):
        generate = MagicMock(side_effect=KeyError("bug"))

        with pytest.raises(KeyError):
            produce_decomposition("deconstructor", generate)

        generate.assert_called_once()


class TestCallbacks:
    """Tests for injected diagnostic sinks."""

    def test_on_retry(self, valid_record, truncated_record):
        on_retry = MagicMock()
        generate = MagicMock(side_effect=[truncated_record, valid_record])

        produce_decomposition("deconstructor", generate, on_retry=on_retry)

        on_retry.assert_called_once()
        attempt, max_attempts, summary = on_retry.call_args.args
        assert (attempt, max_attempts) == (1, 3)
        assert summary.startswith("The final combination")

    def test_on_retry_exhausted(self, truncated_record):
        on_retry = MagicMock()

        produce_decomposition(
            "deconstructor", MagicMock(return_value=truncated_record), max_attempts=2, on_retry=on_retry
        )

        assert on_retry.call_count == 2
        assert on_retry.call_args.args[2].startswith("EXHAUSTED: ")

    def test_on_attempt_states(self, valid_record, truncated_record):
        states = []
        generate = MagicMock(side_effect=[truncated_record, valid_record])

        produce_decomposition(
            "deconstructor",
            generate,
            on_attempt=lambda state, attempt, total: states.append((state, attempt)),
        )

        assert states == [
            (OrchestratorState.ATTEMPTING, 1),
            (OrchestratorState.VALIDATING, 1),
            (OrchestratorState.RETRYING, 1),
            (OrchestratorState.ATTEMPTING, 2),
            (OrchestratorState.VALIDATING, 2),
            (OrchestratorState.ACCEPTED, 2),
        ]

    def test_concurrent_calls_do_not_share_history(self, valid_record, truncated_record):
        first = MagicMock(side_effect=[truncated_record, valid_record])
        second = MagicMock(return_value=valid_record)

        produce_decomposition("deconstructor", first)
        produce_decomposition("deconstructor", second)

        assert "Previous attempts" not in second.call_args.args[1]

"""
Unit tests for FallbackOrchestrator.

Tests the primary/secondary sequencing and the synthetic failure results.
"""

import pytest

from triage_gateway.gateway.orchestrator import FallbackOrchestrator
from triage_gateway.models.results import ClassificationResult, SummaryReplyResult


class TestClassifyFallback:

    @pytest.mark.asyncio
    async def test_primary_success_skips_secondary(self, mock_primary, mock_secondary, good_classification):
        expected = good_classification("together")
        mock_primary.classify.return_value = expected

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        result = await orchestrator.classify("Subject", "Body")

        assert result is expected
        mock_primary.classify.assert_awaited_once_with("Subject", "Body")
        mock_secondary.classify.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_primary_failure_invokes_secondary_once(
        self, mock_primary, mock_secondary, good_classification
    ):
        mock_primary.classify.return_value = ClassificationResult.degraded(
            "together", "network: together returned HTTP 503"
        )
        expected = good_classification("openrouter")
        mock_secondary.classify.return_value = expected

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        result = await orchestrator.classify("Subject", "Body")

        assert result is expected
        assert result.source == "openrouter"
        mock_secondary.classify.assert_awaited_once_with("Subject", "Body")

    @pytest.mark.asyncio
    async def test_both_fail_returns_triage_failure(self, mock_primary, mock_secondary):
        mock_primary.classify.return_value = ClassificationResult.degraded(
            "together", "timeout: Request timeout after 30.0s (ReadTimeout)"
        )
        mock_secondary.classify.return_value = ClassificationResult.degraded(
            "openrouter", "extraction: No JSON block found in response."
        )

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        result = await orchestrator.classify("X", "Y")

        assert result.priority == "medium"
        assert result.sentiment == "unknown"
        assert result.label == "other"
        assert result.intent == "inform"
        assert result.source == "triage-failure"
        assert result.error
        assert result.error.startswith("Email triage was unsuccessful.")
        assert "together: timeout" in result.error
        assert "openrouter: extraction" in result.error
        mock_primary.classify.assert_awaited_once()
        mock_secondary.classify.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_primary_degraded_result_is_never_returned(self, mock_primary, mock_secondary):
        """A degraded primary result always leads to a secondary attempt."""
        mock_primary.classify.return_value = ClassificationResult(
            priority="high", sentiment="neutral", label="work", intent="inform",
            source="together", error="parse: truncated output",
        )
        mock_secondary.classify.return_value = ClassificationResult.degraded("openrouter", "network: down")

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        result = await orchestrator.classify("s", "b")

        assert result.source == "triage-failure"
        assert result.priority == "medium"


class TestSummarizeFallback:

    @pytest.mark.asyncio
    async def test_default_lengths_forwarded(self, mock_primary, mock_secondary, good_summary):
        mock_primary.summarize_and_reply.return_value = good_summary("together")

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        await orchestrator.summarize_and_reply("Body")

        mock_primary.summarize_and_reply.assert_awaited_once_with("Body", 5, 5)
        mock_secondary.summarize_and_reply.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_primary_failure_uses_secondary(self, mock_primary, mock_secondary, good_summary):
        mock_primary.summarize_and_reply.return_value = SummaryReplyResult.degraded(
            "together", "empty_content: Response has no message content"
        )
        expected = good_summary("openrouter")
        mock_secondary.summarize_and_reply.return_value = expected

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        result = await orchestrator.summarize_and_reply("Body", summary_length=3, reply_length=2)

        assert result is expected
        mock_secondary.summarize_and_reply.assert_awaited_once_with("Body", 3, 2)

    @pytest.mark.asyncio
    async def test_both_fail_returns_triage_failure(self, mock_primary, mock_secondary):
        mock_primary.summarize_and_reply.return_value = SummaryReplyResult.degraded("together", "network: a")
        mock_secondary.summarize_and_reply.return_value = SummaryReplyResult.degraded("openrouter", "network: b")

        orchestrator = FallbackOrchestrator(mock_primary, mock_secondary)
        result = await orchestrator.summarize_and_reply("")

        assert result.summary == "Email triage was unsuccessful."
        assert result.reply == "Unable to generate reply."
        assert result.source == "triage-failure"
        assert "Both together and openrouter summarization failed." in result.error


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_context_manager_closes_both_providers(self, mock_primary, mock_secondary):
        async with FallbackOrchestrator(mock_primary, mock_secondary):
            pass

        mock_primary.close.assert_awaited_once()
        mock_secondary.close.assert_awaited_once()

"""
Fallback orchestrator over two provider clients.

Per call, the orchestrator walks a small state machine:

    INIT -> TRY_PRIMARY -> DONE                      (primary succeeded)
    INIT -> TRY_PRIMARY -> TRY_SECONDARY -> DONE     (secondary succeeded, or
                                                      synthetic failure result)

Fallback is strictly sequential and triggered only by the primary's own
degraded result (``error`` set). The orchestrator imposes no timeout of its
own; each provider call is bounded by its client's transport timeout.

Usage:
    orchestrator = FallbackOrchestrator(together_client, openrouter_client)
    result = await orchestrator.classify(subject, body)
"""

from enum import Enum
from typing import Awaitable, Callable, TypeVar, Union
import structlog

from triage_gateway.llm.base_client import (
    OPERATION_CLASSIFY,
    OPERATION_SUMMARIZE,
    BaseProviderClient,
)
from triage_gateway.models.results import (
    TRIAGE_FAILURE_SOURCE,
    ClassificationResult,
    SummaryReplyResult,
)
from triage_gateway.monitoring.metrics import fallbacks_total, triage_failures_total

logger = structlog.get_logger(__name__)

ResultT = TypeVar("ResultT", ClassificationResult, SummaryReplyResult)


class OrchestrationState(str, Enum):
    INIT = "init"
    TRY_PRIMARY = "try_primary"
    TRY_SECONDARY = "try_secondary"
    DONE = "done"


class FallbackOrchestrator:
    """
    Primary-then-secondary orchestration of the gateway operations.

    The public operations are total: they always return a well-formed result
    and never raise to the caller. When both providers fail the result has
    ``source == "triage-failure"`` and a non-empty ``error``.

    Attributes:
        primary: Provider tried first
        secondary: Provider tried only after the primary failed
    """

    def __init__(self, primary: BaseProviderClient, secondary: BaseProviderClient):
        self.primary = primary
        self.secondary = secondary

        logger.info(
            "FallbackOrchestrator initialized",
            primary=primary.name,
            secondary=secondary.name,
        )

    async def classify(self, subject: str, body: str) -> ClassificationResult:
        """
        Classify an email, falling back to the secondary provider on failure.

        Args:
            subject: Email subject
            body: Email body (only its first line reaches the provider)

        Returns:
            ClassificationResult from the first provider that succeeded, or
            the synthetic triage-failure classification
        """
        return await self._run(
            OPERATION_CLASSIFY,
            lambda provider: provider.classify(subject, body),
            self._classification_failure,
        )

    async def summarize_and_reply(
        self, body: str, summary_length: int = 5, reply_length: int = 5
    ) -> SummaryReplyResult:
        """
        Summarize an email and draft a reply, with fallback.

        Args:
            body: Email body
            summary_length: Approximate number of summary lines
            reply_length: Approximate number of reply lines

        Returns:
            SummaryReplyResult from the first provider that succeeded, or the
            synthetic triage-failure result
        """
        return await self._run(
            OPERATION_SUMMARIZE,
            lambda provider: provider.summarize_and_reply(body, summary_length, reply_length),
            self._summary_failure,
        )

    async def _run(
        self,
        operation: str,
        call: Callable[[BaseProviderClient], Awaitable[ResultT]],
        on_both_failed: Callable[[ResultT, ResultT], ResultT],
    ) -> ResultT:
        log = logger.bind(operation=operation)
        state = OrchestrationState.INIT
        log.debug("Orchestration started", state=state.value, primary=self.primary.name)

        state = OrchestrationState.TRY_PRIMARY
        primary_result = await call(self.primary)
        if primary_result.error is None:
            state = OrchestrationState.DONE
            log.debug("Primary provider succeeded", provider=self.primary.name, state=state.value)
            return primary_result

        fallbacks_total.labels(operation=operation).inc()
        log.warning(
            "Primary provider failed, falling back",
            primary=self.primary.name,
            secondary=self.secondary.name,
            error=primary_result.error,
        )

        state = OrchestrationState.TRY_SECONDARY
        secondary_result = await call(self.secondary)
        if secondary_result.error is None:
            state = OrchestrationState.DONE
            log.info("Secondary provider succeeded", provider=self.secondary.name, state=state.value)
            return secondary_result

        state = OrchestrationState.DONE
        triage_failures_total.labels(operation=operation).inc()
        log.error(
            "All providers failed",
            primary_error=primary_result.error,
            secondary_error=secondary_result.error,
            state=state.value,
        )
        return on_both_failed(primary_result, secondary_result)

    def _provider_errors(
        self,
        primary_result: Union[ClassificationResult, SummaryReplyResult],
        secondary_result: Union[ClassificationResult, SummaryReplyResult],
    ) -> str:
        return (
            f"{self.primary.name}: {primary_result.error}; "
            f"{self.secondary.name}: {secondary_result.error}"
        )

    def _classification_failure(
        self, primary_result: ClassificationResult, secondary_result: ClassificationResult
    ) -> ClassificationResult:
        return ClassificationResult.degraded(
            TRIAGE_FAILURE_SOURCE,
            "Email triage was unsuccessful. "
            f"Both {self.primary.name} and {self.secondary.name} classification failed. "
            f"({self._provider_errors(primary_result, secondary_result)})",
        )

    def _summary_failure(
        self, primary_result: SummaryReplyResult, secondary_result: SummaryReplyResult
    ) -> SummaryReplyResult:
        return SummaryReplyResult.degraded(
            TRIAGE_FAILURE_SOURCE,
            f"Both {self.primary.name} and {self.secondary.name} summarization failed. "
            f"({self._provider_errors(primary_result, secondary_result)})",
            summary="Email triage was unsuccessful.",
            reply="Unable to generate reply.",
        )

    async def close(self):
        """Close both providers' HTTP connection pools."""
        await self.primary.close()
        await self.secondary.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

"""
Abstract base client for chat-completion providers.

Defines the two gateway operations on top of a single chat-completion call
and leaves the provider-specific details (headers, response envelope) to the
concrete implementations. The orchestrator only sees the operations.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
import httpx
import structlog

from triage_gateway.config import OperationParams, ProviderConfig
from triage_gateway.llm.prompt_builder import PromptBuilder
from triage_gateway.models.enums import FailureKind, ResultKind
from triage_gateway.models.llm_models import (
    ChatCompletionRequest,
    ChatMessage,
    ProviderFailure,
    ProviderOutcome,
)
from triage_gateway.models.results import ClassificationResult, SummaryReplyResult
from triage_gateway.monitoring.metrics import provider_latency_seconds, provider_requests_total
from triage_gateway.validation.json_parse import JSONParseStage
from triage_gateway.validation.normalizer import normalize


logger = structlog.get_logger(__name__)

OPERATION_CLASSIFY = "classify"
OPERATION_SUMMARIZE = "summarize"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class BaseProviderClient(ABC):
    """
    Abstract base class for provider clients.

    Responsibilities:
    - Build the chat-completion request for each operation
    - Send exactly one HTTP request per call (no internal retry)
    - Extract, parse and normalize the generated text
    - Fold every failure into a degraded result carrying ``error``

    Subclasses implement:
    - ``_build_headers``: auth and provider-specific headers
    - ``_read_content``: pull generated text out of the response envelope

    The public operations never raise. ``asyncio.CancelledError`` is not
    caught, so cancelling the caller cancels the in-flight request.
    """

    def __init__(
        self,
        config: ProviderConfig,
        prompt_builder: PromptBuilder,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize provider client.

        Args:
            config: Immutable provider configuration
            prompt_builder: Prompt builder for this provider's template set
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Optional httpx transport (used by tests to stub the backend)
        """
        self.config = config
        self.prompt_builder = prompt_builder
        self._parser = JSONParseStage()

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )
        self._connection_limits = connection_limits
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Initialized provider client",
            client_class=self.__class__.__name__,
            provider=config.name,
            endpoint=config.completions_url,
            model=config.model,
            timeout=config.timeout,
        )

    @property
    def name(self) -> str:
        return self.config.name

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient", provider=self.name)
        return self._client

    @abstractmethod
    def _build_headers(self) -> Dict[str, str]:
        """Headers for a chat-completion request, including auth."""

    @abstractmethod
    def _read_content(self, data: Any) -> Union[str, ProviderFailure]:
        """
        Extract generated text from a decoded response body.

        Returns:
            Stripped, non-empty content, or ProviderFailure (EMPTY_CONTENT when
            there is no content, PARSE when the envelope is malformed, NETWORK
            when the provider reports an upstream error in the body)
        """

    def _bearer_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _first_choice_message(data: Any) -> Union[Dict[str, Any], ProviderFailure]:
        """Return ``data["choices"][0]["message"]`` or the reason it is missing."""
        if not isinstance(data, dict):
            return ProviderFailure(
                kind=FailureKind.PARSE,
                reason=f"Response body is not an object (got {type(data).__name__})",
            )
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return ProviderFailure(kind=FailureKind.EMPTY_CONTENT, reason="Response has no choices")
        first = choices[0]
        if not isinstance(first, dict) or not isinstance(first.get("message"), dict):
            return ProviderFailure(kind=FailureKind.PARSE, reason="Response choice has no message")
        return first["message"]

    @staticmethod
    def _content_of(message: Dict[str, Any]) -> Union[str, ProviderFailure]:
        content = message.get("content")
        if not isinstance(content, str) or not content.strip():
            return ProviderFailure(
                kind=FailureKind.EMPTY_CONTENT,
                reason="Response has no message content",
            )
        return content.strip()

    async def complete(self, request: ChatCompletionRequest) -> ProviderOutcome:
        """
        Send one chat-completion request.

        POST {base_url}/chat/completions with payload:
        {
            "model": "...",
            "messages": [{"role": "system", ...}, {"role": "user", ...}],
            "temperature": 0.4,
            "max_tokens": 300
        }

        Response:
        {
            "model": "...",
            "choices": [{"message": {"role": "assistant", "content": "..."}}]
        }
        """
        start_time = time.time()

        def elapsed_ms() -> int:
            return int((time.time() - start_time) * 1000)

        logger.info(
            "Sending chat completion request",
            provider=self.name,
            model=request.model,
            prompt_length=sum(len(m.content) for m in request.messages),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )

        try:
            client = await self._get_client()
            response = await client.post(
                self.config.completions_url,
                json=request.to_payload(),
                headers=self._build_headers(),
            )
            response.raise_for_status()
            data = response.json()

        except httpx.TimeoutException as e:
            return ProviderOutcome.failed(
                FailureKind.TIMEOUT,
                f"Request timeout after {self.config.timeout}s ({type(e).__name__})",
                latency_ms=elapsed_ms(),
            )

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.debug(
                "Provider HTTP error body",
                provider=self.name,
                status_code=status_code,
                error_text=e.response.text[:500],
            )
            return ProviderOutcome.failed(
                FailureKind.NETWORK,
                f"{self.name} returned HTTP {status_code}",
                latency_ms=elapsed_ms(),
            )

        except httpx.HTTPError as e:
            return ProviderOutcome.failed(
                FailureKind.NETWORK,
                f"Network error: {type(e).__name__}: {e}",
                latency_ms=elapsed_ms(),
            )

        except ValueError as e:
            # response.json() raises json.JSONDecodeError, a ValueError
            return ProviderOutcome.failed(
                FailureKind.PARSE,
                f"Invalid JSON response from {self.name}: {e}",
                latency_ms=elapsed_ms(),
            )

        content = self._read_content(data)
        if isinstance(content, ProviderFailure):
            return ProviderOutcome(failure=content, latency_ms=elapsed_ms())

        model_version = data.get("model", request.model) if isinstance(data, dict) else request.model
        return ProviderOutcome.success(content, model_version=model_version, latency_ms=elapsed_ms())

    async def classify(self, subject: str, body: str) -> ClassificationResult:
        """
        Classify an email by subject and first body line.

        Returns:
            ClassificationResult; on any failure a degraded result with
            ``error`` set and ``source`` = this provider
        """
        messages = self.prompt_builder.classification_messages(_as_text(subject), _as_text(body))
        result = await self._run(
            OPERATION_CLASSIFY, ResultKind.CLASSIFICATION, messages, self.config.classify
        )
        if isinstance(result, ProviderFailure):
            return ClassificationResult.degraded(self.name, str(result))
        return result

    async def summarize_and_reply(
        self, body: str, summary_length: int = 5, reply_length: int = 5
    ) -> SummaryReplyResult:
        """
        Summarize an email and suggest a reply.

        Returns:
            SummaryReplyResult; on any failure a degraded result with
            ``error`` set and ``source`` = this provider
        """
        messages = self.prompt_builder.summary_messages(_as_text(body), summary_length, reply_length)
        result = await self._run(
            OPERATION_SUMMARIZE, ResultKind.SUMMARY_REPLY, messages, self.config.summarize
        )
        if isinstance(result, ProviderFailure):
            return SummaryReplyResult.degraded(self.name, str(result))
        return result

    async def _run(
        self,
        operation: str,
        kind: ResultKind,
        messages: tuple[ChatMessage, ...],
        params: OperationParams,
    ) -> Union[ClassificationResult, SummaryReplyResult, ProviderFailure]:
        request = ChatCompletionRequest(
            model=self.config.model,
            messages=messages,
            temperature=params.temperature,
            max_tokens=params.max_tokens,
        )
        outcome = await self.complete(request)
        provider_latency_seconds.labels(
            provider=self.name, operation=operation
        ).observe(outcome.latency_ms / 1000.0)

        failure = outcome.failure
        parsed: Any = None
        if failure is None:
            parsed = self._parser.parse(outcome.raw_text or "")
            if isinstance(parsed, ProviderFailure):
                failure = parsed

        if failure is not None:
            provider_requests_total.labels(
                provider=self.name, operation=operation, outcome=failure.kind.value
            ).inc()
            logger.warning(
                "Provider call failed",
                provider=self.name,
                operation=operation,
                failure_kind=failure.kind.value,
                reason=failure.reason,
                latency_ms=outcome.latency_ms,
            )
            return failure

        provider_requests_total.labels(
            provider=self.name, operation=operation, outcome="success"
        ).inc()
        logger.info(
            "Provider call successful",
            provider=self.name,
            operation=operation,
            model=outcome.model_version,
            latency_ms=outcome.latency_ms,
        )
        return normalize(parsed, kind, self.name)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed provider client connection", provider=self.name)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"provider={self.name}, "
            f"model={self.config.model}, "
            f"timeout={self.config.timeout}s)"
        )

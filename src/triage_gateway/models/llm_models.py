"""
LLM-specific data models for the request/response cycle.

These models are internal to the provider layer. They describe one
chat-completion call and its outcome, and never outlive a single gateway call.
"""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from triage_gateway.models.enums import FailureKind


MAX_TEMPERATURE = 2.0
MAX_COMPLETION_TOKENS = 8192


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """
    Request payload for an OpenAI-compatible chat completions endpoint.

    Built per call by the provider client and serialized with ``to_payload``.
    """
    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model identifier as known by the backend")
    messages: tuple[ChatMessage, ...] = Field(..., description="System message followed by the user message")
    temperature: float = Field(default=0.4, ge=0.0, le=MAX_TEMPERATURE, description="Sampling temperature")
    max_tokens: int = Field(default=300, ge=1, le=MAX_COMPLETION_TOKENS, description="Maximum tokens to generate")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [message.model_dump() for message in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


class ProviderFailure(BaseModel):
    """Declared failure of a single provider call."""
    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    reason: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.reason}"


class ProviderOutcome(BaseModel):
    """
    Either the raw text generated by a provider or the reason it failed.

    Exactly one of ``raw_text`` and ``failure`` is set.
    """
    model_config = ConfigDict(frozen=True)

    raw_text: Optional[str] = None
    failure: Optional[ProviderFailure] = None
    model_version: Optional[str] = Field(default=None, description="Model reported by the backend")
    latency_ms: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _exactly_one_variant(self) -> "ProviderOutcome":
        if (self.raw_text is None) == (self.failure is None):
            raise ValueError("ProviderOutcome needs exactly one of raw_text or failure")
        return self

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(
        cls, raw_text: str, model_version: Optional[str] = None, latency_ms: int = 0
    ) -> "ProviderOutcome":
        return cls(raw_text=raw_text, model_version=model_version, latency_ms=latency_ms)

    @classmethod
    def failed(cls, kind: FailureKind, reason: str, latency_ms: int = 0) -> "ProviderOutcome":
        return cls(failure=ProviderFailure(kind=kind, reason=reason), latency_ms=latency_ms)

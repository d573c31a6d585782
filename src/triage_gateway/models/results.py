"""
Result models returned by the gateway operations.

Both models are frozen. A result with ``error`` set is degraded: it is still
well-formed, but its content comes from a default table rather than a provider.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from triage_gateway.models.enums import (
    IntentEnum,
    LabelEnum,
    PriorityEnum,
    SentimentEnum,
)


TRIAGE_FAILURE_SOURCE = "triage-failure"
NO_REPLY_NEEDED = "This email does not require a reply."


class ClassificationResult(BaseModel):
    """
    Triage metadata assigned to an email.

    The four classification fields are plain strings: providers may answer
    outside the documented vocabularies and such values are passed through.
    """
    model_config = ConfigDict(frozen=True)

    priority: str = Field(..., min_length=1, description="high | medium | low")
    sentiment: str = Field(..., min_length=1, description="positive | neutral | negative | unknown")
    label: str = Field(
        ...,
        min_length=1,
        description="otp | work | meeting | personal | transaction | support | marketing | other",
    )
    intent: str = Field(..., min_length=1, description="inform | request | confirm | escalate | notify")
    source: str = Field(..., min_length=1, description="Provider identifier or 'triage-failure'")
    error: Optional[str] = Field(default=None, description="Set only on degraded results")

    @property
    def is_degraded(self) -> bool:
        return self.error is not None

    @classmethod
    def degraded(cls, source: str, error: str) -> "ClassificationResult":
        """Build the fixed fallback classification used when a provider fails."""
        return cls(
            priority=PriorityEnum.MEDIUM.value,
            sentiment=SentimentEnum.UNKNOWN.value,
            label=LabelEnum.OTHER.value,
            intent=IntentEnum.INFORM.value,
            source=source,
            error=error,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize without the ``error`` key on healthy results."""
        return self.model_dump(exclude_none=True)


class SummaryReplyResult(BaseModel):
    """Summary of an email plus a suggested reply."""
    model_config = ConfigDict(frozen=True)

    summary: str = Field(..., min_length=1)
    reply: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    error: Optional[str] = Field(default=None)

    @property
    def is_degraded(self) -> bool:
        return self.error is not None

    @classmethod
    def degraded(
        cls,
        source: str,
        error: str,
        summary: str = "Failed to process summary.",
        reply: str = "Could not generate reply.",
    ) -> "SummaryReplyResult":
        return cls(summary=summary, reply=reply, source=source, error=error)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

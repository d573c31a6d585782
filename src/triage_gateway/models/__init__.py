"""
Pydantic data models for the triage gateway.

Includes:
- Enums (PriorityEnum, SentimentEnum, LabelEnum, IntentEnum, ResultKind, FailureKind)
- Result models (ClassificationResult, SummaryReplyResult)
- LLM models (ChatMessage, ChatCompletionRequest, ProviderFailure, ProviderOutcome)
"""

from triage_gateway.models.enums import (
    PriorityEnum,
    SentimentEnum,
    LabelEnum,
    IntentEnum,
    ResultKind,
    FailureKind,
)
from triage_gateway.models.results import (
    NO_REPLY_NEEDED,
    TRIAGE_FAILURE_SOURCE,
    ClassificationResult,
    SummaryReplyResult,
)
from triage_gateway.models.llm_models import (
    ChatMessage,
    ChatCompletionRequest,
    ProviderFailure,
    ProviderOutcome,
)

__all__ = [
    # Enums
    "PriorityEnum",
    "SentimentEnum",
    "LabelEnum",
    "IntentEnum",
    "ResultKind",
    "FailureKind",
    # Results
    "NO_REPLY_NEEDED",
    "TRIAGE_FAILURE_SOURCE",
    "ClassificationResult",
    "SummaryReplyResult",
    # LLM models
    "ChatMessage",
    "ChatCompletionRequest",
    "ProviderFailure",
    "ProviderOutcome",
]

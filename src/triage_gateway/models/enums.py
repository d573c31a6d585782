"""
Enumerations for triage gateway data models.

These are the vocabularies the prompts ask the providers to choose from.
Result models do not reject values outside these sets; the normalizer
accepts them and flags them (see validation.normalizer).
"""

from enum import Enum


class PriorityEnum(str, Enum):
    """Email priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SentimentEnum(str, Enum):
    """
    Email sentiment.

    UNKNOWN is never requested from a provider; it marks degraded results.
    """

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    UNKNOWN = "unknown"


class LabelEnum(str, Enum):
    """Single-label category of an email."""

    OTP = "otp"
    WORK = "work"
    MEETING = "meeting"
    PERSONAL = "personal"
    TRANSACTION = "transaction"
    SUPPORT = "support"
    MARKETING = "marketing"
    OTHER = "other"


class IntentEnum(str, Enum):
    """What the sender wants from the recipient."""

    INFORM = "inform"
    REQUEST = "request"
    CONFIRM = "confirm"
    ESCALATE = "escalate"
    NOTIFY = "notify"


class ResultKind(str, Enum):
    """Which gateway operation a result belongs to."""

    CLASSIFICATION = "classification"
    SUMMARY_REPLY = "summary_reply"


class FailureKind(str, Enum):
    """
    Why a provider call produced no usable result.

    The orchestrator treats every kind the same way; the kind is kept for
    logs and metrics.
    """

    NETWORK = "network"
    TIMEOUT = "timeout"
    EMPTY_CONTENT = "empty_content"
    EXTRACTION = "extraction"
    PARSE = "parse"

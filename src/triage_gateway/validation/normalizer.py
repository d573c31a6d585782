"""
Normalization of parsed provider output into result models.

A field is present when its value is not None and not a blank string.
Present values are used as-is; absent ones take the default from the
tables below. Missing fields are never an error.

Classification values outside the documented vocabularies are accepted.
This is a deliberate relaxation: each occurrence is logged and counted in
``unrecognized_values_total`` so drift stays visible.
"""

from enum import Enum
from typing import Any, Mapping, Union
import structlog

from triage_gateway.models.enums import (
    IntentEnum,
    LabelEnum,
    PriorityEnum,
    ResultKind,
    SentimentEnum,
)
from triage_gateway.models.results import ClassificationResult, SummaryReplyResult
from triage_gateway.monitoring.metrics import unrecognized_values_total

logger = structlog.get_logger(__name__)


CLASSIFICATION_DEFAULTS: dict[str, str] = {
    "priority": PriorityEnum.MEDIUM.value,
    "sentiment": SentimentEnum.NEUTRAL.value,
    "label": LabelEnum.OTHER.value,
    "intent": IntentEnum.INFORM.value,
}

SUMMARY_REPLY_DEFAULTS: dict[str, str] = {
    "summary": "No summary generated.",
    "reply": "No reply generated.",
}

_VOCABULARIES: dict[str, type[Enum]] = {
    "priority": PriorityEnum,
    "sentiment": SentimentEnum,
    "label": LabelEnum,
    "intent": IntentEnum,
}


def _field_value(parsed: Mapping[str, Any], field: str, default: str) -> str:
    value = parsed.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        value = str(value)
    if not value.strip():
        return default
    return value


def _flag_unrecognized(field: str, value: str, source: str) -> None:
    allowed = {member.value for member in _VOCABULARIES[field]}
    if value not in allowed:
        unrecognized_values_total.labels(field=field).inc()
        logger.warning(
            "Accepted value outside vocabulary",
            field=field,
            value=value,
            source=source,
        )


def normalize_classification(parsed: Mapping[str, Any], source: str) -> ClassificationResult:
    """
    Build a ClassificationResult from a parsed provider object.

    Args:
        parsed: Decoded JSON object from the provider
        source: Provider identifier recorded on the result

    Returns:
        ClassificationResult with every field populated and no error
    """
    values = {
        field: _field_value(parsed, field, default)
        for field, default in CLASSIFICATION_DEFAULTS.items()
    }
    for field, value in values.items():
        _flag_unrecognized(field, value, source)
    return ClassificationResult(**values, source=source)


def normalize_summary_reply(parsed: Mapping[str, Any], source: str) -> SummaryReplyResult:
    """Build a SummaryReplyResult from a parsed provider object."""
    values = {
        field: _field_value(parsed, field, default)
        for field, default in SUMMARY_REPLY_DEFAULTS.items()
    }
    return SummaryReplyResult(**values, source=source)


def normalize(
    parsed: Mapping[str, Any], kind: ResultKind, source: str
) -> Union[ClassificationResult, SummaryReplyResult]:
    """Dispatch to the normalizer for ``kind``."""
    if kind is ResultKind.CLASSIFICATION:
        return normalize_classification(parsed, source)
    if kind is ResultKind.SUMMARY_REPLY:
        return normalize_summary_reply(parsed, source)
    raise ValueError(f"Unknown result kind: {kind!r}")

"""
Email Triage Gateway.

Dual-provider inference gateway that turns an email into:
- A classification (priority, sentiment, label, intent)
- A summary plus a suggested reply

Architecture: Together (primary) and OpenRouter (secondary) chat-completion
clients behind a sequential fallback orchestrator. Every call returns a
well-formed result; failures surface as degraded results, never exceptions.
"""

from triage_gateway.gateway import FallbackOrchestrator, create_gateway
from triage_gateway.models import ClassificationResult, SummaryReplyResult

__version__ = "0.1.0"

__all__ = [
    "FallbackOrchestrator",
    "create_gateway",
    "ClassificationResult",
    "SummaryReplyResult",
]

"""
Gateway entry points.

- FallbackOrchestrator: primary-then-secondary orchestration, total contract
- create_gateway: builds the orchestrator and both provider clients from Settings
"""

from triage_gateway.gateway.orchestrator import FallbackOrchestrator, OrchestrationState
from triage_gateway.gateway.factory import create_gateway

__all__ = [
    "FallbackOrchestrator",
    "OrchestrationState",
    "create_gateway",
]

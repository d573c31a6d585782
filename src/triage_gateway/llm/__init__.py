"""
Provider client abstraction and implementations.

Components:
- BaseProviderClient: Abstract base class for chat-completion providers
- TogetherClient: Primary provider (Together AI)
- OpenRouterClient: Secondary provider (OpenRouter)
- PromptBuilder: Renders per-provider prompt templates
- text_utils: First-line and truncation helpers
- exceptions: Start-up configuration errors
"""

from triage_gateway.llm.base_client import BaseProviderClient
from triage_gateway.llm.together_client import TogetherClient
from triage_gateway.llm.openrouter_client import OpenRouterClient
from triage_gateway.llm.prompt_builder import PromptBuilder
from triage_gateway.llm.exceptions import GatewayConfigurationError

__all__ = [
    "BaseProviderClient",
    "TogetherClient",
    "OpenRouterClient",
    "PromptBuilder",
    "GatewayConfigurationError",
]

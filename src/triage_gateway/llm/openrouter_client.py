"""
OpenRouter client (secondary provider).

OpenRouter proxies many upstream models behind an OpenAI-compatible API at
https://openrouter.ai/api/v1/chat/completions. Two differences from a plain
OpenAI-style backend matter here:
- Optional attribution headers (HTTP-Referer, X-Title)
- Upstream failures can arrive as an ``error`` object inside a 2xx body,
  either at the top level or on a choice
"""

from typing import Any, Dict, Union
import structlog

from triage_gateway.llm.base_client import BaseProviderClient
from triage_gateway.models.enums import FailureKind
from triage_gateway.models.llm_models import ProviderFailure


logger = structlog.get_logger(__name__)


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        code = error.get("code")
        message = error.get("message") or "unknown upstream error"
        return f"{message} (code {code})" if code is not None else str(message)
    return str(error)


class OpenRouterClient(BaseProviderClient):
    """OpenRouter-specific provider client."""

    def _build_headers(self) -> Dict[str, str]:
        headers = self._bearer_headers()
        headers.update(self.config.extra_headers)
        return headers

    def _read_content(self, data: Any) -> Union[str, ProviderFailure]:
        if isinstance(data, dict) and data.get("error"):
            return ProviderFailure(
                kind=FailureKind.NETWORK,
                reason=f"OpenRouter upstream error: {_error_message(data['error'])}",
            )

        message = self._first_choice_message(data)
        if isinstance(message, ProviderFailure):
            return message

        choice = data["choices"][0]
        if choice.get("error"):
            return ProviderFailure(
                kind=FailureKind.NETWORK,
                reason=f"OpenRouter upstream error: {_error_message(choice['error'])}",
            )

        logger.debug(
            "OpenRouter routed request",
            model=data.get("model"),
            upstream_provider=data.get("provider"),
            finish_reason=choice.get("finish_reason"),
        )
        return self._content_of(message)

"""
Together AI client (primary provider).

Together exposes an OpenAI-compatible chat completions API at
https://api.together.xyz/v1/chat/completions with bearer-token auth.
"""

from typing import Any, Dict, Union
import structlog

from triage_gateway.llm.base_client import BaseProviderClient
from triage_gateway.models.llm_models import ProviderFailure


logger = structlog.get_logger(__name__)


class TogetherClient(BaseProviderClient):
    """
    Together-specific provider client.

    Response envelope:
    {
        "id": "...",
        "model": "meta-llama/Llama-3.3-70B-Instruct-Turbo-Free",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": "..."},
                     "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 120, "completion_tokens": 40, "total_tokens": 160}
    }
    """

    def _build_headers(self) -> Dict[str, str]:
        return self._bearer_headers()

    def _read_content(self, data: Any) -> Union[str, ProviderFailure]:
        message = self._first_choice_message(data)
        if isinstance(message, ProviderFailure):
            return message

        usage = data.get("usage")
        if not isinstance(usage, dict):
            usage = {}
        logger.debug(
            "Together usage",
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
            finish_reason=data["choices"][0].get("finish_reason"),
        )
        return self._content_of(message)

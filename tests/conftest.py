"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from typing import Any, Callable, Dict, Optional

import httpx
import pytest

from triage_gateway.config import DEFAULT_PROMPT_TEMPLATES_DIR, ProviderConfig, Settings
from triage_gateway.llm.prompt_builder import PromptBuilder


TOGETHER_HOST = "api.together.test"
OPENROUTER_HOST = "openrouter.test"


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with fake credentials and test-only hosts.

    Explicit values take priority over environment variables and .env, so the
    tests never reach a real provider.
    """
    return Settings(
        # === Application ===
        APP_NAME="Email Triage Gateway (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Providers ===
        TOGETHER_API_KEY="test-together-key",
        TOGETHER_BASE_URL=f"https://{TOGETHER_HOST}/v1",
        TOGETHER_MODEL="meta-llama/Llama-3.3-70B-Instruct-Turbo-Free",
        OPENROUTER_API_KEY="test-openrouter-key",
        OPENROUTER_BASE_URL=f"https://{OPENROUTER_HOST}/api/v1",
        OPENROUTER_MODEL="deepseek/deepseek-v3-base:free",
        OPENROUTER_REFERER="https://triage.example.com",
        OPENROUTER_TITLE="Triage Gateway Tests",

        # === Transport ===
        PROVIDER_TIMEOUT=5.0,
        BODY_TRUNCATION_LIMIT=2000,
        PROMPT_TEMPLATES_DIR=None,
    )


@pytest.fixture
def together_config(test_settings: Settings) -> ProviderConfig:
    return test_settings.provider_configs()[0]


@pytest.fixture
def openrouter_config(test_settings: Settings) -> ProviderConfig:
    return test_settings.provider_configs()[1]


@pytest.fixture
def together_prompts() -> PromptBuilder:
    return PromptBuilder(DEFAULT_PROMPT_TEMPLATES_DIR, "together", body_truncation_limit=2000)


@pytest.fixture
def openrouter_prompts() -> PromptBuilder:
    return PromptBuilder(DEFAULT_PROMPT_TEMPLATES_DIR, "openrouter", body_truncation_limit=2000)


def chat_completion_body(content: Optional[str], model: str = "test-model") -> Dict[str, Any]:
    """Build an OpenAI-style chat completion response body."""
    return {
        "id": "cmpl-test",
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 120, "completion_tokens": 40, "total_tokens": 160},
    }


@pytest.fixture
def chat_response() -> Callable[..., httpx.Response]:
    """Factory fixture for a 200 chat completion response.

    Usage:
        def test_something(chat_response):
            response = chat_response('{"priority": "high"}')
    """
    def _create(content: Optional[str], status_code: int = 200, model: str = "test-model") -> httpx.Response:
        return httpx.Response(status_code, json=chat_completion_body(content, model=model))

    return _create


@pytest.fixture
def classification_json() -> str:
    return (
        '{"priority": "high", "sentiment": "negative", "label": "support", "intent": "escalate"}'
    )


@pytest.fixture
def summary_json() -> str:
    return (
        '{"summary": "Customer reports a damaged product from order #12345.", '
        '"reply": "Sorry about that, we will send a replacement today."}'
    )

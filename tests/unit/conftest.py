"""Unit test fixtures (mocks and stubs).

Provides mock provider clients for testing the orchestrator without HTTP.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from triage_gateway.models.results import ClassificationResult, SummaryReplyResult


def _mock_provider(name: str) -> Mock:
    provider = Mock()
    provider.name = name  # name is a Mock() constructor argument, set it afterwards
    provider.classify = AsyncMock()
    provider.summarize_and_reply = AsyncMock()
    provider.close = AsyncMock()
    return provider


@pytest.fixture
def mock_primary() -> Mock:
    """Mock primary provider; configure return values per test."""
    return _mock_provider("together")


@pytest.fixture
def mock_secondary() -> Mock:
    """Mock secondary provider; configure return values per test."""
    return _mock_provider("openrouter")


@pytest.fixture
def good_classification():
    """Factory for a healthy ClassificationResult from a given source."""
    def _create(source: str = "together") -> ClassificationResult:
        return ClassificationResult(
            priority="high",
            sentiment="negative",
            label="support",
            intent="escalate",
            source=source,
        )

    return _create


@pytest.fixture
def good_summary():
    """Factory for a healthy SummaryReplyResult from a given source."""
    def _create(source: str = "together") -> SummaryReplyResult:
        return SummaryReplyResult(
            summary="Design review tomorrow at 10 AM in Room B.",
            reply="Thanks, I will be there with the mockups.",
            source=source,
        )

    return _create

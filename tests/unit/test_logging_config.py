"""Unit tests for structlog configuration and its use by create_gateway."""

import logging
from unittest.mock import Mock

import pytest
import structlog

from triage_gateway.gateway import factory
from triage_gateway.logging_config import (
    GATEWAY_NAME,
    add_gateway_name,
    configure_logging,
    redact_credentials,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:

    def test_installs_single_stdout_handler(self):
        configure_logging("DEBUG", "development")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_quiets_http_client_loggers(self):
        configure_logging("INFO", "production")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty", "development")
        assert logging.getLogger().level == logging.INFO


class TestGatewayLoggingSetup:

    def test_opt_in(self, test_settings, monkeypatch):
        configure = Mock()
        monkeypatch.setattr(factory, "configure_logging", configure)

        factory.create_gateway(test_settings, setup_logging=True)

        configure.assert_called_once_with("DEBUG", "development")

    def test_off_by_default(self, test_settings, monkeypatch):
        configure = Mock()
        monkeypatch.setattr(factory, "configure_logging", configure)

        factory.create_gateway(test_settings)

        configure.assert_not_called()


class TestProcessors:

    def test_credential_fields_are_masked(self):
        event = redact_credentials(
            None, "info", {"event": "x", "api_key": "sk-live", "Authorization": "Bearer sk-live"}
        )

        assert event["api_key"] == "***"
        assert event["Authorization"] == "***"

    def test_bearer_token_in_error_body_is_masked(self):
        event = redact_credentials(
            None, "warning",
            {"event": "Provider HTTP error body", "error_text": '{"echo": "Authorization: Bearer sk-abc123"}'},
        )

        assert event["error_text"] == '{"echo": "Authorization: Bearer ***"}'

    def test_other_fields_untouched(self):
        event = redact_credentials(None, "info", {"event": "ok", "provider": "together", "latency_ms": 12})
        assert event == {"event": "ok", "provider": "together", "latency_ms": 12}

    def test_gateway_name_added(self):
        assert add_gateway_name(None, "info", {"event": "x"})["app"] == GATEWAY_NAME

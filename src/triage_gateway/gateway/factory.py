"""
Gateway assembly.

Builds the provider clients and the orchestrator once, from a Settings
instance, so the credentials and per-provider configuration are read a single
time at process start.
"""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from triage_gateway.config import ProviderConfig, Settings
from triage_gateway.gateway.orchestrator import FallbackOrchestrator
from triage_gateway.llm.exceptions import GatewayConfigurationError
from triage_gateway.llm.openrouter_client import OpenRouterClient
from triage_gateway.llm.prompt_builder import PromptBuilder
from triage_gateway.llm.together_client import TogetherClient
from triage_gateway.logging_config import configure_logging


logger = structlog.get_logger(__name__)


def _check_provider_config(config: ProviderConfig) -> None:
    if not config.api_key:
        raise GatewayConfigurationError(
            f"API key is required for provider {config.name}",
            details={"provider": config.name},
        )
    if not config.model:
        raise GatewayConfigurationError(
            f"Model identifier is required for provider {config.name}",
            details={"provider": config.name},
        )


def create_gateway(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    setup_logging: bool = False,
) -> FallbackOrchestrator:
    """
    Create the fallback orchestrator with Together as primary and OpenRouter
    as secondary provider.

    Args:
        settings: Application settings (default: loaded from environment)
        transport: Optional httpx transport shared by both clients (tests)
        setup_logging: Configure structlog from LOG_LEVEL and ENVIRONMENT
            (for applications that have no logging setup of their own)

    Returns:
        FallbackOrchestrator ready for concurrent use

    Raises:
        GatewayConfigurationError: Missing credentials, model or templates, or
            sampling parameters outside the accepted range
    """
    settings = settings or Settings()
    if setup_logging:
        configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)

    try:
        together_config, openrouter_config = settings.provider_configs()
    except ValidationError as e:
        raise GatewayConfigurationError(
            f"Invalid provider configuration: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

    for config in (together_config, openrouter_config):
        _check_provider_config(config)

    def prompt_builder_for(config: ProviderConfig) -> PromptBuilder:
        return PromptBuilder(
            templates_dir=settings.prompt_templates_dir,
            prompt_set=config.prompt_set,
            body_truncation_limit=settings.BODY_TRUNCATION_LIMIT,
        )

    primary = TogetherClient(together_config, prompt_builder_for(together_config), transport=transport)
    secondary = OpenRouterClient(
        openrouter_config, prompt_builder_for(openrouter_config), transport=transport
    )

    logger.info(
        "Gateway created",
        primary=primary.name,
        secondary=secondary.name,
        body_truncation_limit=settings.BODY_TRUNCATION_LIMIT,
    )
    return FallbackOrchestrator(primary, secondary)

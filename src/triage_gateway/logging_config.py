"""
structlog setup for the gateway.

Provider events already carry ``provider``, ``operation`` and
``failure_kind`` fields. The processors here stamp every event with the
gateway name, mask credentials (provider error bodies can echo request
headers), and render JSON in production or colored console output elsewhere.
Records from httpx and other stdlib loggers go through the same chain.
"""

import logging
import re
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


GATEWAY_NAME = "email-triage-gateway"
REDACTED = "***"

SENSITIVE_KEYS = frozenset({"api_key", "authorization", "x-api-key", "token"})
_BEARER_TOKEN = re.compile(r"(bearer\s+)[^\s\"',]+", re.IGNORECASE)

# Per-request INFO lines from the HTTP stack duplicate the provider events
NOISY_LOGGERS = ("httpx", "httpcore")


def add_gateway_name(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict.setdefault("app", GATEWAY_NAME)
    return event_dict


def redact_credentials(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credential fields and bearer tokens embedded in string values."""
    for key, value in list(event_dict.items()):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, str):
            event_dict[key] = _BEARER_TOKEN.sub(rf"\g<1>{REDACTED}", value)
    return event_dict


def _pre_chain(is_production: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_gateway_name,
        redact_credentials,
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer(is_production: bool) -> Processor:
    if is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """
    Route structlog and stdlib logging to a single stdout handler.

    Args:
        log_level: Level name; unknown names fall back to INFO
        environment: "production" selects the JSON renderer
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"
    pre_chain = _pre_chain(is_production)

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(is_production),
            foreign_pre_chain=pre_chain,
        )
    )
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=environment,
        renderer="json" if is_production else "console",
    )

"""
Structured logging for ethproofs-api.

Every entry carries the application name and the architectural position of
the code that emitted it:

    {
        "app": "ethproofs-api",
        "layer": "client",              # client | transport | config
        "component": "dispatcher",
        "module": "client",
        "event": "request_dispatched",
        "method": "GET",
        "endpoint": "/proofs?limit=100&offset=0",
        "severity": "DEBUG"
    }

The library itself only emits DEBUG events and never configures logging.
Applications call ``setup_logging`` once at startup.
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor

Layer = Literal["client", "transport", "config"]

APP_NAME = "ethproofs-api"

SEVERITY_BY_LEVEL = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
}

# Keys whose values are credentials
SECRET_KEYS = frozenset({"api_key", "authorization", "headers"})
REDACTED = "***"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["app"] = APP_NAME
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mirror ``level`` into ``severity`` for log collectors that expect it."""
    level = event_dict.get("level")
    if level:
        event_dict["severity"] = SEVERITY_BY_LEVEL.get(level, "INFO")
    return event_dict


def redact_secrets(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask API keys and auth headers bound or passed by callers."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _build_processors(json_logs: bool, include_timestamp: bool) -> list[Processor]:
    processors: list[Processor] = []
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    processors += [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        redact_secrets,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Route structlog through the stdlib root logger.

    Args:
        level: Root level name; unknown names fall back to INFO
        json_logs: One JSON object per line, or coloured console output
        include_timestamp: Prepend an ISO-8601 ``timestamp`` field

    Usage:
        >>> from ethproofs_api.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    # basicConfig is a no-op once the root logger has handlers
    logging.root.setLevel(log_level)

    structlog.configure(
        processors=_build_processors(json_logs, include_timestamp),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Return a logger with ``layer``, ``component`` and ``module`` bound.

    Usage:
        >>> log = get_logger("client", layer="client", component="dispatcher")
        >>> log.debug("request_dispatched", method="GET", endpoint="/clusters")
    """
    context = {
        key: value
        for key, value in (("layer", layer), ("component", component), ("module", name))
        if value
    }
    context.update(initial_context)

    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_client_logger(component: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """Dispatcher and response decoding."""
    return get_logger("client", layer="client", component=component, **context)


def get_transport_logger(
    component: str, **context: Any
) -> structlog.stdlib.BoundLogger:
    """HTTP adapters behind ``IHttpClient``."""
    return get_logger("transport", layer="transport", component=component, **context)


def get_config_logger(component: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """Settings loading."""
    return get_logger("config", layer="config", component=component, **context)

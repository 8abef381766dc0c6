"""Structlog configuration for loriapi."""

import logging
import sys

import structlog

from loriapi.config import ClientConfig, LogFormat

# Event keys that may carry the credential
SECRET_KEYS = frozenset({"api_key", "authorization", "headers"})


def redact_secrets(logger, method_name: str, event_dict: dict) -> dict:
    """Structlog processor that masks credential-bearing keys."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def configure_logging(config: ClientConfig | None = None) -> None:
    """
    Configure structlog for the client.

    Args:
        config: ClientConfig instance, uses defaults if None
    """
    if config is None:
        config = ClientConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        redact_secrets,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional component name bound as logger_name

    Returns:
        structlog BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger

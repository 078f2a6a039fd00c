"""
Structured logging built on structlog.

Loggers are used event-first with keyword context:

    logger = get_logger(__name__)
    logger.info("question_reused", similarity=0.93)
"""

import logging
import sys

import structlog

REDACTED = "***REDACTED***"

# Exact keys that are always redacted
SENSITIVE_KEYS = {
    "api_key",
    "openai_api_key",
    "password",
    "secret",
    "token",
    "access_token",
    "refresh_token",
    "authorization",
    "mongo_uri",
}

# Key suffixes that are redacted ("*_tokens" counts are not)
SENSITIVE_SUFFIXES = ("_api_key", "_password", "_secret")


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return lowered in SENSITIVE_KEYS or lowered.endswith(SENSITIVE_SUFFIXES)


def filter_sensitive_data(logger, method_name: str, event_dict: dict) -> dict:
    """structlog processor masking credentials in the event dict."""
    for key in list(event_dict.keys()):
        if _is_sensitive(key):
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure stdlib logging and structlog once per process.

    Args:
        level: Minimum log level name
        json_logs: Render JSON lines instead of the console format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            filter_sensitive_data,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None):
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


__all__ = ["configure_logging", "filter_sensitive_data", "get_logger"]

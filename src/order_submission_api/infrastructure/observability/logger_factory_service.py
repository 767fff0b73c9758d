"""Structlog-based logging configuration with the order service schema and stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from order_submission_api.infrastructure.observability.logging.order_log_schema_processor import (
    order_log_schema_processor,
)

_CONFIGURED = False

_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")


def configure_logging(level: str = "INFO", log_format: str | None = None, env: str | None = None) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by ``log_format`` (json|console), then by ``env``.
    Both fall back to the LOG_FORMAT / APP_ENV environment variables.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer(log_format, env)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        order_log_schema_processor,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelNamesMapping()[level.upper()]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: core modules log through logging.getLogger()
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(component: str) -> Any:
    """Return a structlog logger pre-bound with context_component.

    The proxy stays lazy until first use, so module-level loggers pick up
    the configuration applied later by configure_logging().
    """
    return structlog.get_logger(context_component=component)


def _select_renderer(log_format: str | None, env: str | None) -> Any:
    fmt = (log_format or os.environ.get("LOG_FORMAT", "")).lower()
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=True)

    environment = (env or os.environ.get("APP_ENV", "local")).lower()
    if environment in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)

"""Structlog-based logging configuration with the service log schema.

Provides:
- configure_logging(): one-shot structlog + stdlib setup driven by service settings
- get_logger(): structlog logger bound to a component name
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from micro_obs.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)

_CONFIGURED = False

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})


def configure_logging(level: str = "info", app_env: str = "local", log_format: str | None = None) -> None:
    """Configure structlog and route stdlib loggers (uvicorn, redis) through it.

    Only the first call takes effect. ``log_format`` (``json`` or ``console``)
    wins over the environment default: JSON outside local/dev environments.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    log_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    renderer = _renderer_for(app_env, log_format)
    shared_processors = _shared_processors()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _bridge_stdlib(log_level, [*shared_processors, renderer])


def get_logger(component: str) -> Any:
    """Return a lazy structlog logger whose events carry ``context.component``.

    Safe at import time: the pipeline is resolved on first use, after
    :func:`configure_logging` has run.
    """
    return structlog.get_logger(context_component=component)


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_schema_processor,
    ]


def _bridge_stdlib(log_level: int, processors: list[Any]) -> None:
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *processors],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)


def _renderer_for(app_env: str, log_format: str | None) -> Any:
    fmt = (log_format or "").lower()
    if not fmt:
        fmt = "json" if app_env.lower() in JSON_ENVIRONMENTS else "console"
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

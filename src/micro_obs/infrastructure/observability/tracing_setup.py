"""OpenTelemetry spans around pipeline steps, client calls and Redis adapters."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

TRACER_NAME = "micro_obs"

_CONFIGURED = False


def configure_tracing(service_name: str, app_env: str = "local", console_export: bool = False) -> None:
    """Install the global TracerProvider once per process.

    Without ``console_export`` spans are created (and their ids reach the logs)
    but not exported anywhere.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "deployment.environment": app_env})
    )
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def trace_operation(span_name: str, attributes: Mapping[str, str] | None = None) -> Callable:
    """Run the decorated function (sync or async) inside a span named ``span_name``.

    Usage:
        @trace_operation("redis.order.save", {"db.system": "redis"})
        async def save(self, order): ...
    """
    span_attributes = dict(attributes or {})

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _start_span(span_name, span_attributes):
                    return await func(*args, **kwargs)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _start_span(span_name, span_attributes):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def _start_span(span_name: str, attributes: dict[str, str]):
    return trace.get_tracer(TRACER_NAME).start_as_current_span(span_name, attributes=attributes)

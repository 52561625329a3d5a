"""Pure ASGI middleware recording Prometheus request metrics per route."""

from __future__ import annotations

import time
from typing import Any

from micro_obs.infrastructure.observability.metrics_service import (
    REQUEST_DURATION_SECONDS,
    REQUESTS_IN_FLIGHT,
    REQUESTS_TOTAL,
    RESPONSE_SIZE_BYTES,
)

UNMATCHED_HANDLER = "unmatched"


class MetricsMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        http_status = 500
        body_size = 0
        start = time.perf_counter()

        async def _capture(message: dict[str, Any]) -> None:
            nonlocal http_status, body_size
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
            elif message.get("type") == "http.response.body":
                body_size += len(message.get("body", b""))
            await send(message)

        REQUESTS_IN_FLIGHT.inc()
        try:
            await self.app(scope, receive, _capture)
        finally:
            REQUESTS_IN_FLIGHT.dec()
            handler = _handler_name(scope)
            method = str(scope.get("method", "UNKNOWN"))
            REQUESTS_TOTAL.labels(handler=handler, method=method, code=str(http_status)).inc()
            REQUEST_DURATION_SECONDS.labels(handler=handler, method=method).observe(
                time.perf_counter() - start
            )
            RESPONSE_SIZE_BYTES.labels(handler=handler).observe(body_size)


def _handler_name(scope: dict[str, Any]) -> str:
    """Name of the matched route; the router stores it in the scope while dispatching."""
    route = scope.get("route")
    return getattr(route, "name", None) or UNMATCHED_HANDLER

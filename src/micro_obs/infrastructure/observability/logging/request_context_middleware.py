"""Pure ASGI middleware for request ID propagation via structlog contextvars.

Binds request_id, endpoint and method into structlog context for every HTTP
request, echoes the request ID back in the ``X-Request-ID`` response header
and logs request completion with duration.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Not get_logger(): the logger factory imports this package.
logger = structlog.get_logger(context_component="http")

REQUEST_ID_HEADER = b"x-request-id"


class RequestContextMiddleware:
    """ASGI middleware that binds the request ID to structlog contextvars."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        request_id = _extract_header(scope, REQUEST_ID_HEADER) or str(uuid4())
        bind_contextvars(
            request_id=request_id,
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )
        http_status = 500
        start = time.perf_counter()

        async def _send_with_request_id(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, _send_with_request_id)
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "Request processed",
                processing_status="SUCCESS" if http_status < 400 else "ERROR",
                http_status=http_status,
                processing_duration_ms=duration_ms,
            )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None

"""Pure ASGI middleware for correlation ID propagation via structlog contextvars.

Binds correlation_id, endpoint and method into the structlog context for every
HTTP request, echoes the correlation ID back in the response headers and logs
request completion with its duration.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

CORRELATION_HEADER = b"x-correlation-id"

logger = structlog.get_logger()


class CorrelationMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        clear_contextvars()
        correlation_id = _extract_header(scope, CORRELATION_HEADER) or str(uuid4())
        bind_contextvars(
            correlation_id=correlation_id,
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )

        http_status = 500
        start = time.perf_counter()

        async def _send_with_correlation(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, _send_with_correlation)
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            await logger.ainfo(
                "Request processed",
                processing_status="SUCCESS" if http_status < 400 else "ERROR",
                processing_http_status=http_status,
                processing_duration_ms=duration_ms,
            )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    for key, value in headers:
        if key.lower() == name:
            return value.decode("latin-1")
    return None

"""Pure ASGI middleware for correlation ID propagation via structlog contextvars.

Binds correlation_id, endpoint and method for every HTTP request, echoes the
correlation id back as a response header and logs completion with duration.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

CORRELATION_HEADER = b"x-correlation-id"


class CorrelationMiddleware:
    """ASGI middleware that binds a correlation ID to structlog contextvars."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        correlation_id = _extract_header(scope, CORRELATION_HEADER) or str(uuid4())
        bind_contextvars(
            correlation_id=correlation_id,
            context_endpoint=_extract_path(scope),
            context_method=_extract_method(scope),
        )
        http_status = 500
        start = time.perf_counter()
        try:
            http_status = await self._dispatch(scope, receive, send, correlation_id)
        finally:
            await self._log_request_completion(http_status, start)
            clear_contextvars()

    async def _dispatch(
        self, scope: dict[str, Any], receive: Any, send: Any, correlation_id: str
    ) -> int:
        """Run the app, capturing the status code and adding the correlation header."""
        http_status = 500

        async def _send_with_header(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, _send_with_header)
        return http_status

    @staticmethod
    async def _log_request_completion(http_status: int, start: float) -> None:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        status_label = "SUCCESS" if http_status < 400 else "ERROR"
        await logger.ainfo(
            "Request processed",
            processing_status=status_label,
            processing_duration_ms=duration_ms,
            processing_http_status=http_status,
        )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None


def _extract_path(scope: dict[str, Any]) -> str:
    return str(scope.get("path", "/"))


def _extract_method(scope: dict[str, Any]) -> str:
    return str(scope.get("method", "UNKNOWN"))

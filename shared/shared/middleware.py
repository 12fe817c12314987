"""ASGI middleware for request-ID tracing and access logging.

``RequestContextMiddleware`` tags each request with ``X-Request-Id`` and
binds it into structlog context vars. ``AccessLogMiddleware`` writes one
log line per request once the handler has finished.

Add ``AccessLogMiddleware`` first so the tracing middleware wraps it and the
access line carries the request id.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

REQUEST_ID_HEADER = "X-Request-Id"

log = structlog.get_logger("http")


def time_request_id() -> str:
    """Request id from the wall clock in nanoseconds."""
    return str(time.time_ns())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Injects a request ID into each request, response and structlog context."""

    def __init__(
        self,
        app: ASGIApp,
        next_request_id: Callable[[], str] = time_request_id,
    ) -> None:
        super().__init__(app)
        self._next_request_id = next_request_id

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or self._next_request_id()
        request.state.request_id = request_id

        # Bind to structlog context vars so every log line includes the ID
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response: Response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs method, path, peer and user agent for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            log.info(
                "http_request",
                request_id=getattr(request.state, "request_id", "unknown"),
                method=request.method,
                path=request.url.path,
                remote_addr=_remote_addr(request),
                user_agent=request.headers.get("user-agent", ""),
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )


def _remote_addr(request: Request) -> str:
    if request.client is None:
        return ""
    return f"{request.client.host}:{request.client.port}"

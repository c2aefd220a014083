"""Request logging middleware.

Logs one line when a request starts and one when it completes, with the
processing time. The time is also returned in the ``X-Process-Time`` header,
and requests slower than ``slow_threshold`` seconds are logged as warnings.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

SLOW_REQUEST_THRESHOLD = 1.0


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request/response logging with timing."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | None = None,
        header_name: str = "X-Process-Time",
        slow_threshold: float = SLOW_REQUEST_THRESHOLD,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or set()
        self.header_name = header_name
        self.slow_threshold = slow_threshold

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        log_request = not any(
            request.url.path.endswith(path) for path in self.exclude_paths
        )
        if log_request:
            bind_context(
                method=request.method,
                path=request.url.path,
                client_ip=self._get_client_ip(request),
            )
            logger.info(
                "Request started",
                query_params=str(request.query_params) or None,
            )

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        elapsed_ms = round(elapsed * 1000, 2)

        response.headers[self.header_name] = f"{elapsed_ms}ms"

        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request",
                method=request.method,
                path=request.url.path,
                process_time_ms=elapsed_ms,
            )
        if log_request:
            logger.info(
                "Request completed",
                status_code=response.status_code,
                process_time_ms=elapsed_ms,
            )
        return response

    @staticmethod
    def _get_client_ip(request: Request) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        if request.client:
            return request.client.host
        return "unknown"

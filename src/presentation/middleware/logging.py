"""Request/response logging middleware with timing and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration, and records HTTP metrics."""

    SENSITIVE_PARAMS = frozenset({"password"})

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        log = logger.bind(method=method, path=path)
        log.info("request_started", query=self._safe_query(request))

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            record_http_request(method, path, 500, duration)
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            raise

        duration = time.perf_counter() - start_time
        record_http_request(method, path, response.status_code, duration)
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        return response

    def _safe_query(self, request: Request) -> dict | None:
        """Query parameters with credentials masked."""
        if not request.query_params:
            return None
        return {
            key: "***" if key in self.SENSITIVE_PARAMS else value
            for key, value in request.query_params.items()
        }

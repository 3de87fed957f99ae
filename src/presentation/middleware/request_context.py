"""Request ID propagation for tracing across logs, errors and responses."""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def get_request_id() -> Optional[str]:
    """Request ID of the request being handled, None outside a request."""
    return request_id_var.get()


def resolve_request_id(header_value: Optional[str]) -> str:
    """
    Reuse the caller's request ID if it is safe to log, else mint one.

    Callers such as loan brokers may send arbitrary header values; only
    short IDs without whitespace or control characters are echoed back.
    """
    if header_value and _VALID_REQUEST_ID.fullmatch(header_value):
        return header_value
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Binds a request ID to the request context.

    The ID is visible through `get_request_id`, attached to every
    structlog event of the request, and echoed in the response headers.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next):
        request_id = resolve_request_id(request.headers.get(self.HEADER_NAME))

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
            response.headers[self.HEADER_NAME] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)

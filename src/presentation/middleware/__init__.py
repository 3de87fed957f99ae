"""HTTP middleware: request IDs, request logging and error responses."""

from .error_handler import error_handler_middleware, error_response
from .logging import LoggingMiddleware
from .request_context import RequestContextMiddleware, get_request_id

__all__ = [
    "error_handler_middleware",
    "error_response",
    "get_request_id",
    "LoggingMiddleware",
    "RequestContextMiddleware",
]

"""Error handling middleware and exception handlers."""

from http import HTTPStatus
from typing import List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    InvalidStateException,
    NotFoundException,
    QuoteValidationException,
    RemoteRejectedException,
    RemoteUnavailableException,
)
from src.presentation.schemas import ErrorResponseSchema
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_response(status_code: int, code: str, reasons: List[str]) -> JSONResponse:
    """Build a JSON error response in the standard error format."""
    body = ErrorResponseSchema(
        error=code,
        status=HTTPStatus(status_code).name,
        reasons=reasons,
        request_id=get_request_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(QuoteValidationException)
    async def validation_handler(
        request: Request,
        exc: QuoteValidationException,
    ) -> JSONResponse:
        """Handle invalid quote requests with every reason found."""
        return error_response(400, exc.code, exc.reasons)

    @app.exception_handler(NotFoundException)
    async def not_found_handler(
        request: Request,
        exc: NotFoundException,
    ) -> JSONResponse:
        """Handle missing credit configuration or group."""
        return error_response(404, exc.code, exc.reasons)

    @app.exception_handler(InvalidStateException)
    async def invalid_state_handler(
        request: Request,
        exc: InvalidStateException,
    ) -> JSONResponse:
        """Handle remote data this service cannot work with."""
        logger.error(
            "invalid_state",
            request_id=get_request_id(),
            message=exc.message,
        )
        return error_response(500, exc.code, exc.reasons)

    @app.exception_handler(RemoteRejectedException)
    async def remote_rejected_handler(
        request: Request,
        exc: RemoteRejectedException,
    ) -> JSONResponse:
        """Handle 4xx answers of the config backend, a misconfiguration on our side."""
        logger.error(
            "config_backend_rejected",
            request_id=get_request_id(),
            message=exc.message,
            status_code=exc.status_code,
        )
        return error_response(
            502,
            exc.code,
            ["Config backend rejected the request."],
        )

    @app.exception_handler(RemoteUnavailableException)
    async def remote_unavailable_handler(
        request: Request,
        exc: RemoteUnavailableException,
    ) -> JSONResponse:
        """Handle an unreachable config backend."""
        logger.error(
            "config_backend_unavailable",
            request_id=get_request_id(),
            message=exc.message,
            status_code=exc.status_code,
            attempts=exc.attempts,
        )
        return error_response(
            503,
            exc.code,
            ["Service temporarily unavailable. Please try again."],
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return error_response(400, exc.code, exc.reasons)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(
            500,
            "INTERNAL_ERROR",
            ["An unexpected error occurred."],
        )

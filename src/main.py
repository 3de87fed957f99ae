"""
vBank Credit - Main Application Entry Point

A credit quote service for a simulated bank taking part in a loan
broker exercise. Quote bounds and client groups live in a remote
config backend.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from src import __version__
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging on startup. Nothing is pooled: remote clients are
    opened per request.
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        bank_name=settings.bank_name,
        config_backend=settings.config_backend_url,
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="vBank Credit",
    description="Credit quote service of the vbank",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


if settings.metrics_enabled:

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=get_metrics(),
            media_type=get_metrics_content_type(),
        )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

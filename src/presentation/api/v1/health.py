"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from src import __version__
from src.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    bank: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and the bank it quotes for.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__, bank=settings.bank_name)

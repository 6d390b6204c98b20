"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from shared.config import Settings, get_settings
from shared.database import ping

from ..dependencies import ServiceContainer, get_container

router = APIRouter()
root_router = APIRouter()

HEALTH_MESSAGE = "FoodShare API is running"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@root_router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Plain-text liveness string."""
    return HEALTH_MESSAGE


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(container: ServiceContainer = Depends(get_container)):
    """
    Readiness check endpoint.

    Returns 503 if MongoDB does not answer a ping.
    """
    if not ping(container.db):
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(status="unavailable", database="unreachable").model_dump(),
        )
    return ReadinessResponse(status="ready", database="connected")

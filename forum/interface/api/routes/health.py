"""Liveness and readiness probes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from forum.config import Settings
from forum.domain.model.common import utcnow
from forum.domain.repository import PostRepository
from forum.util.observability import SERVICE_VERSION

router = APIRouter(prefix="/health", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    status: str
    posts: int | None = None


@router.get("", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """The process is up and serving requests."""
    return HealthResponse(
        status="healthy",
        timestamp=utcnow(),
        version=SERVICE_VERSION,
        environment=settings.environment,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    post_repository: FromDishka[PostRepository],
) -> ReadinessResponse | JSONResponse:
    """Storage answers queries; 503 otherwise."""
    try:
        posts = await post_repository.count()
    except Exception as e:
        logfire.error("Readiness check failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return ReadinessResponse(status="ready", posts=posts)

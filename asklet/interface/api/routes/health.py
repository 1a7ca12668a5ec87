"""Health check route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from asklet.adapter.realtime import ConnectionRegistry
from asklet.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness plus the deployed version and open stream count."""

    status: str
    timestamp: datetime
    environment: str
    version: str
    git_sha: str
    live_connections: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    registry: FromDishka[ConnectionRegistry],
) -> HealthResponse:
    """Report liveness without touching the database."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version="0.1.0",
        git_sha=settings.git_sha,
        live_connections=registry.connection_count,
    )

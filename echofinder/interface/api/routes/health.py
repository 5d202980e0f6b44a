"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from echofinder.config import Settings
from echofinder.util.clock import Clock

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    git_sha: str
    time: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], clock: FromDishka[Clock]
) -> HealthResponse:
    """Basic health check endpoint.

    Does not touch the database.
    """
    return HealthResponse(
        status="ok",
        service=settings.service_name,
        version=settings.version,
        git_sha=settings.git_sha,
        time=clock.now(),
    )

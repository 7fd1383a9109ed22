"""Health check endpoints for monitoring system status."""
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.config.settings import get_settings
from app.db.database import check_database_health

router = APIRouter(prefix="/health", tags=["health"])
settings = get_settings()


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy or unhealthy")
    app: str
    database: str = Field(..., description="connected or disconnected")
    timestamp: str = Field(..., description="ISO 8601 timestamp of check")


@router.get("", response_model=HealthCheckResponse)
async def health_check():
    """
    Public health check endpoint.

    Returns 503 when the database cannot be reached so load balancers take
    the instance out of rotation.
    """
    db_healthy = await check_database_health()
    payload = HealthCheckResponse(
        status="healthy" if db_healthy else "unhealthy",
        app=settings.app_name,
        database="connected" if db_healthy else "disconnected",
        timestamp=datetime.now(UTC).isoformat(),
    )
    if not db_healthy:
        return JSONResponse(status_code=503, content=payload.model_dump())
    return payload

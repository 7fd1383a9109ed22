"""API routes module."""
from app.api.routes.tracks import router as tracks_router
from app.api.routes.sessions import router as sessions_router
from app.api.routes.health import router as health_router
from app.api.routes.metrics import router as metrics_router

__all__ = [
    "tracks_router",
    "sessions_router",
    "health_router",
    "metrics_router",
]

"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config.settings import get_settings
from app.core.error_handlers import domain_error_handler
from app.core.exceptions import DomainError
from app.core.logging import configure_logging
from app.db.database import close_all_engines, init_db
from app.middleware import MetricsMiddleware, RequestIDMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging()

    # Startup: Initialize database
    await init_db()

    yield

    # Shutdown: Close database connections
    try:
        await close_all_engines()
    except Exception as e:
        logger.warning(f"Failed to close database engines: {e}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Generates and serves weekly training sessions for each track",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware)
    # Added last so it runs first and the id is set for everything below it
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(DomainError, domain_error_handler)

    # Import and include routers
    from app.api.routes import (
        health_router,
        metrics_router,
        sessions_router,
        tracks_router,
    )

    app.include_router(tracks_router, prefix="/tracks", tags=["Tracks"])
    app.include_router(sessions_router, prefix="/sessions", tags=["Sessions"])
    app.include_router(health_router)
    app.include_router(metrics_router, tags=["Metrics"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)

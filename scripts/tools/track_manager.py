"""
Track management library used by the track CLI.

Wraps one database session per ``async with`` block:
- Seed the canonical tracks
- Generate sessions for one track or all of them
- Report generation coverage
"""
from app.core.exceptions import DomainError
from app.core.logging import get_logger
from app.db.database import async_session_maker, init_db
from app.db.seed import seed_tracks
from app.schemas.generation import GenerationResult
from app.schemas.track import CoverageReport
from app.services.track_sessions import TrackSessionService
from app.services.workout_generator import WorkoutGeneratorService

logger = get_logger(__name__)


class TrackManager:
    """Core track management operations."""
    
    def __init__(self, session_factory=async_session_maker):
        self._session_factory = session_factory
        self.session = None
    
    async def __aenter__(self):
        self.session = self._session_factory()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            await self.session.commit()
        else:
            await self.session.rollback()
        await self.session.close()

    async def seed(self) -> int:
        await init_db()
        return await seed_tracks(self.session)

    async def generate(self, slug: str, start_week: int, week_count: int, seed: int | None = None) -> GenerationResult:
        service = WorkoutGeneratorService(self.session, seed=seed)
        return await service.generate(slug, start_week, week_count)

    async def generate_all(
        self, start_week: int, week_count: int, seed: int | None = None
    ) -> dict[str, list]:
        """Generate every active track, continuing past failures.

        Returns ``{"successful": [GenerationResult], "failed": [(slug, error)]}``.
        """
        tracks = await TrackSessionService(self.session).list_tracks()
        slugs = [t.slug for t in tracks]

        results = {"successful": [], "failed": []}
        for slug in slugs:
            try:
                results["successful"].append(await self.generate(slug, start_week, week_count, seed))
            except DomainError as e:
                logger.error("track_generation_failed", track=slug, code=e.code, error=e.message)
                results["failed"].append((slug, e))
        return results

    async def coverage(self, slug: str | None = None) -> list[CoverageReport]:
        service = TrackSessionService(self.session)
        if slug is not None:
            return [await service.coverage(slug)]
        return [await service.coverage(t.slug) for t in await service.list_tracks()]

from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError
from app.models import Track
from app.repositories.track_repository import TrackRepository

class BaseService:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _track_or_404(self, slug: str, error_msg: str | None = None) -> Track:
        """Load a track by slug; a missing row fails the template stage."""
        track = await TrackRepository(self._session).get_by_slug(slug)
        if not track:
            raise NotFoundError(
                "track",
                error_msg or f"Track {slug} not found",
                {"track": slug, "stage": "template"}
            )
        return track

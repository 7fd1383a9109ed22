"""Read side for tracks: published sessions and generation coverage."""
import logging
from collections import defaultdict

from app.core.exceptions import NotFoundError
from app.models import TrainingSession, Track
from app.repositories.session_repository import SessionRepository
from app.repositories.track_repository import TrackRepository
from app.schemas.track import CoverageReport, WeekCoverage
from app.services.base import BaseService

logger = logging.getLogger(__name__)


class TrackSessionService(BaseService):
    async def list_tracks(self) -> list[Track]:
        return await TrackRepository(self._session).list_active()

    async def list_sessions(
        self,
        slug: str,
        week_number: int | None = None,
        day_of_week: int | None = None,
    ) -> list[TrainingSession]:
        """Published sessions of a track, optionally narrowed to a week and day."""
        track = await self._track_or_404(slug)
        return await SessionRepository(self._session).list_for_track(
            track.id, week_number=week_number, day_of_week=day_of_week
        )

    async def get_session(self, session_id: int) -> TrainingSession:
        session = await SessionRepository(self._session).get(session_id)
        if session is None:
            raise NotFoundError("session", f"Session {session_id} not found", {"id": session_id})
        return session

    async def coverage(self, slug: str) -> CoverageReport:
        """
        Summarise what has been generated for a track.

        A week between the first and last generated week with no sessions at
        all is a missing week; a generated week with fewer distinct days than
        the track trains is reported with the days it lacks.
        """
        track = await self._track_or_404(slug)
        sessions = await SessionRepository(self._session).list_for_track(track.id, published_only=False)

        days_by_week: dict[int, set[int]] = defaultdict(set)
        count_by_week: dict[int, int] = defaultdict(int)
        for session in sessions:
            days_by_week[session.week_number].add(session.day_of_week)
            count_by_week[session.week_number] += 1

        expected_days = set(range(1, track.days_per_week + 1))
        weeks = []
        for week_number in sorted(days_by_week):
            days = days_by_week[week_number]
            weeks.append(
                WeekCoverage(
                    week_number=week_number,
                    sessions=count_by_week[week_number],
                    days_covered=sorted(days),
                    missing_days=sorted(expected_days - days),
                )
            )

        missing_weeks: list[int] = []
        week_range = None
        if days_by_week:
            first, last = min(days_by_week), max(days_by_week)
            week_range = f"{first}-{last}"
            missing_weeks = [w for w in range(first, last + 1) if w not in days_by_week]

        if missing_weeks:
            logger.info(f"Track {slug} has gaps in weeks {missing_weeks}")

        return CoverageReport(
            track=track.slug,
            track_name=track.name,
            expected_sessions_per_week=track.days_per_week * track.sessions_per_day,
            total_sessions=len(sessions),
            week_range=week_range,
            missing_weeks=missing_weeks,
            weeks=weeks,
        )

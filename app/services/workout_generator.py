"""
Workout generator.

Entry point for ``generate(track_slug, start_week, week_count)``. Walks weeks
then days strictly in order, planning and writing one session at a time.
Each session is its own unit of work: sessions written before a failure stay
committed and the failing coordinate keeps its previous generation.
"""

from __future__ import annotations

import time

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import get_settings
from app.core.exceptions import GenerationError, ValidationError
from app.core.logging import get_logger
from app.core.metrics import track_generation_duration, track_session_generated
from app.schemas.generation import GeneratedSessionSummary, GenerationResult
from app.services.base import BaseService
from app.services.generation_types import GeneratorContext
from app.services.movement_selector import MovementSelector
from app.services.session_planner import SessionPlanner
from app.services.session_writer import SessionWriter
from app.services.track_templates import get_week_plan, resolve_track_kind

logger = get_logger(__name__)


class WorkoutGeneratorService(BaseService):
    def __init__(self, session: AsyncSession, seed: int | None = None):
        super().__init__(session)
        self._seed = seed if seed is not None else get_settings().generator_seed

    def _validate_range(self, start_week: int, week_count: int) -> None:
        if start_week < 1:
            raise ValidationError("start_week", "must be >= 1", {"start_week": start_week})
        if week_count < 1:
            raise ValidationError("week_count", "must be >= 1", {"week_count": week_count})

        max_week_count = get_settings().max_week_count
        if week_count > max_week_count:
            raise ValidationError(
                "week_count",
                f"must be <= {max_week_count}",
                {"week_count": week_count},
            )

    async def generate(self, track_slug: str, start_week: int = 1, week_count: int = 1) -> GenerationResult:
        """Generate ``week_count`` weeks of sessions for a track.

        Existing sessions at the same (track, week, day, sub-session)
        coordinates are replaced, so calling this twice with the same
        arguments leaves the same set of rows behind.

        Raises:
            ValidationError: start_week or week_count out of range.
            UnknownTrackKindError: no weekly template for ``track_slug``.
            NotFoundError: the slug is known but no track row exists.
            GenerationError: a session could not be replaced.
        """
        self._validate_range(start_week, week_count)
        kind = resolve_track_kind(track_slug)
        track = await self._track_or_404(track_slug)

        track_name = track.name
        week_plan = get_week_plan(kind)

        context = GeneratorContext.seeded(self._seed)
        planner = SessionPlanner(MovementSelector(context))
        writer = SessionWriter(self._session, track)

        log = logger.bind(track=track_slug, start_week=start_week, week_count=week_count)
        log.info("generation_started", days_per_week=len(week_plan))
        started = time.perf_counter()

        summaries: list[GeneratedSessionSummary] = []
        end_week = start_week + week_count
        try:
            for week_number in range(start_week, end_week):
                for template in week_plan:
                    planned = planner.plan_session(template, week_number)
                    try:
                        row = await writer.write(planned)
                    except SQLAlchemyError as e:
                        track_session_generated(track_slug, "failed")
                        log.error(
                            "session_write_failed",
                            week=week_number,
                            day=template.day,
                            error=str(e),
                        )
                        raise GenerationError(
                            track_slug,
                            "persistence",
                            f"Failed to replace session for week {week_number} day {template.day}",
                            details={"week": week_number, "day": template.day},
                        ) from e
                    except GenerationError:
                        track_session_generated(track_slug, "failed")
                        raise

                    track_session_generated(track_slug, "created")
                    summaries.append(
                        GeneratedSessionSummary(
                            session_id=row.id,
                            name=planned.name,
                            day=template.day,
                            sub_session=template.sub_session.value if template.sub_session else None,
                            focus=template.focus,
                            blocks_created=len(planned.blocks),
                        )
                    )

                context.finish_week(week_number)
        finally:
            track_generation_duration(track_slug, time.perf_counter() - started)

        log.info("generation_completed", workouts_created=len(summaries))
        return GenerationResult(
            track=track_slug,
            track_name=track_name,
            start_week=start_week,
            weeks_generated=week_count,
            workouts_created=len(summaries),
            sessions=summaries,
        )

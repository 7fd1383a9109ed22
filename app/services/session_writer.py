"""
Session writer.

Persists a PlannedSession, replacing whatever was previously generated for
the same (track, week, day, sub-session) coordinate. The delete and the
inserts run in one unit of work, so a failure part-way leaves the previous
generation in place instead of a missing session.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.programming import DEFAULT_CATALOG_EQUIPMENT, DEFAULT_CATALOG_SKILL_LEVEL
from app.core.exceptions import IncompleteBlockError
from app.core.logging import get_logger
from app.core.metrics import (
    track_assignment_skipped,
    track_catalog_exercise_created,
    track_session_replaced,
)
from app.core.transactions import transactional
from app.models import Block, BlockExercise, Exercise, TrainingSession, Track
from app.models.enums import BlockType
from app.repositories.exercise_repository import ExerciseRepository
from app.repositories.session_repository import SessionRepository
from app.services.generation_types import ExerciseAssignment, PlannedBlock, PlannedSession

logger = get_logger(__name__)


class SessionWriter:
    def __init__(self, session: AsyncSession, track: Track):
        self._session = session
        # Plain copies: a rollback expires ORM state and the writer must
        # still be able to describe the track afterwards.
        self._track_id = track.id
        self._track_slug = track.slug
        self._sessions = SessionRepository(session)
        self._exercises = ExerciseRepository(session)

    @transactional
    async def write(self, planned: PlannedSession) -> TrainingSession:
        template = planned.template
        label = template.sub_session.value if template.sub_session else None
        log = logger.bind(
            track=self._track_slug,
            week=planned.week_number,
            day=template.day,
            sub_session=label,
        )

        existing = await self._sessions.get_by_coordinate(
            self._track_id, planned.week_number, template.day, label
        )
        if existing is not None:
            await self._sessions.delete_entity(existing)
            track_session_replaced(self._track_slug)
            log.info("session_replaced", previous_session_id=existing.id)

        row = TrainingSession(
            track_id=self._track_id,
            week_number=planned.week_number,
            day_of_week=template.day,
            sub_session_label=label,
            name=planned.name,
            focus=template.focus,
            session_type=template.session_type.value,
            duration_minutes=template.duration_minutes,
            intensity_level=template.intensity,
            is_published=True,
            blocks=[],
        )
        await self._sessions.create(row)

        for planned_block in planned.blocks:
            await self._write_block(row, planned_block, log)

        log.info("session_written", session_id=row.id, blocks=len(planned.blocks))
        return row

    async def _write_block(self, row: TrainingSession, planned: PlannedBlock, log) -> Block:
        block = Block(
            block_type=planned.block_type.value,
            name=planned.name,
            sequence=planned.sequence,
            duration_minutes=planned.duration_minutes,
            exercises=[],
        )
        row.blocks.append(block)
        await self._session.flush()

        written = 0
        for assignment in planned.exercises:
            exercise = await self._resolve_exercise(assignment, log)
            if exercise is None:
                continue

            written += 1
            block.exercises.append(
                BlockExercise(
                    exercise=exercise,
                    sequence=written,
                    sets=assignment.sets,
                    reps=assignment.reps,
                    duration_seconds=assignment.duration_seconds,
                    load_type=assignment.load_type.value,
                    load_value=assignment.load_value,
                    rest_seconds=assignment.rest_seconds,
                    notes=assignment.notes,
                    scaling_notes=assignment.scaling_notes,
                )
            )
            # Keep link rows out of the next exercise's savepoint
            await self._session.flush()

        if written == 0 and planned.block_type is not BlockType.WARM_UP:
            raise IncompleteBlockError(
                self._track_slug,
                planned.name,
                {"week": row.week_number, "day": row.day_of_week},
            )
        return block

    async def _resolve_exercise(self, assignment: ExerciseAssignment, log) -> Exercise | None:
        """Match the catalog by name or create the entry.

        Runs in a SAVEPOINT: a failure drops only this assignment and leaves
        the rest of the session's writes intact.
        """
        try:
            async with self._session.begin_nested():
                exercise = await self._exercises.find_by_fuzzy_name(assignment.exercise_name)
                if exercise is None:
                    exercise = await self._exercises.create(
                        Exercise(
                            name=assignment.exercise_name,
                            category=assignment.category,
                            equipment=list(DEFAULT_CATALOG_EQUIPMENT),
                            skill_level=DEFAULT_CATALOG_SKILL_LEVEL,
                            is_active=True,
                        )
                    )
                    track_catalog_exercise_created()
                    log.debug("catalog_exercise_created", exercise=assignment.exercise_name)
                return exercise
        except SQLAlchemyError as e:
            track_assignment_skipped()
            log.warning(
                "assignment_skipped",
                exercise=assignment.exercise_name,
                error=str(e),
            )
            return None

from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from sqlalchemy.orm import selectinload
from app.models.session import Block, BlockExercise, TrainingSession
from app.repositories.base import Repository


def _with_content(query):
    return query.options(
        selectinload(TrainingSession.blocks)
        .selectinload(Block.exercises)
        .selectinload(BlockExercise.exercise)
    )


class SessionRepository(Repository[TrainingSession, int]):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, id: int) -> TrainingSession | None:
        result = await self._session.execute(
            _with_content(select(TrainingSession)).where(TrainingSession.id == id)
        )
        return result.scalar_one_or_none()

    async def get_by_coordinate(
        self,
        track_id: int,
        week_number: int,
        day_of_week: int,
        sub_session_label: str | None = None,
    ) -> TrainingSession | None:
        label_clause = (
            TrainingSession.sub_session_label.is_(None)
            if sub_session_label is None
            else TrainingSession.sub_session_label == sub_session_label
        )
        result = await self._session.execute(
            _with_content(select(TrainingSession))
            .where(
                and_(
                    TrainingSession.track_id == track_id,
                    TrainingSession.week_number == week_number,
                    TrainingSession.day_of_week == day_of_week,
                    label_clause,
                )
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_for_track(
        self,
        track_id: int,
        week_number: int | None = None,
        day_of_week: int | None = None,
        published_only: bool = True,
    ) -> list[TrainingSession]:
        query = _with_content(select(TrainingSession)).where(TrainingSession.track_id == track_id)

        if published_only:
            query = query.where(TrainingSession.is_published.is_(True))

        if week_number is not None:
            query = query.where(TrainingSession.week_number == week_number)

        if day_of_week is not None:
            query = query.where(TrainingSession.day_of_week == day_of_week)

        query = query.execution_options(populate_existing=True).order_by(
            TrainingSession.week_number,
            TrainingSession.day_of_week,
            TrainingSession.sub_session_label,
        )
        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def create(self, entity: TrainingSession) -> TrainingSession:
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def delete(self, id: int) -> bool:
        session = await self.get(id)
        if session:
            await self.delete_entity(session)
            return True
        return False

    async def delete_entity(self, entity: TrainingSession) -> None:
        """Delete a loaded session with its blocks and block exercises.

        Flushes immediately so a replacement row for the same coordinate can
        be inserted in the same transaction.
        """
        await self._session.delete(entity)
        await self._session.flush()

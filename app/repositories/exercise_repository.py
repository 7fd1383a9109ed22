from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.models.exercise import Exercise
from app.repositories.base import Repository


class ExerciseRepository(Repository[Exercise, int]):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, id: int) -> Exercise | None:
        return await self._session.get(Exercise, id)

    async def find_by_fuzzy_name(self, name: str) -> Exercise | None:
        """First catalog row whose name contains ``name``, ignoring case.

        Substring matching is imprecise for short or overlapping names:
        "Pull-ups" also matches "Chest-to-Bar Pull-ups", whichever row is
        oldest wins.
        """
        result = await self._session.execute(
            select(Exercise)
            .where(Exercise.name.ilike(f"%{name}%"))
            .order_by(Exercise.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create(self, entity: Exercise) -> Exercise:
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def delete(self, id: int) -> bool:
        exercise = await self.get(id)
        if exercise:
            await self._session.delete(exercise)
            return True
        return False

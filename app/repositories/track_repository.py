from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.models.track import Track
from app.repositories.base import Repository


class TrackRepository(Repository[Track, int]):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, id: int) -> Track | None:
        return await self._session.get(Track, id)

    async def get_by_slug(self, slug: str) -> Track | None:
        result = await self._session.execute(
            select(Track).where(Track.slug == slug)
        )
        return result.scalar_one_or_none()

    async def list_active(self) -> list[Track]:
        result = await self._session.execute(
            select(Track)
            .where(Track.is_active.is_(True))
            .order_by(Track.display_order, Track.id)
        )
        return list(result.scalars().all())

    async def create(self, entity: Track) -> Track:
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def delete(self, id: int) -> bool:
        track = await self.get(id)
        if track:
            await self._session.delete(track)
            return True
        return False

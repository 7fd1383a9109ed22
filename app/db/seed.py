"""Canonical track rows."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Track
from app.models.enums import TrackKind
from app.repositories.track_repository import TrackRepository

logger = logging.getLogger(__name__)


CANONICAL_TRACKS = [
    {
        "slug": TrackKind.MEDEIROS_METHOD.value,
        "name": "Medeiros Method",
        "description": "Balanced strength, skill and conditioning six days a week.",
        "days_per_week": 6,
        "sessions_per_day": 1,
    },
    {
        "slug": TrackKind.COMPETE.value,
        "name": "Compete",
        "description": "Twice-daily competition preparation.",
        "days_per_week": 7,
        "sessions_per_day": 2,
    },
    {
        "slug": TrackKind.CONJUGATE_STRENGTH.value,
        "name": "Conjugate Strength",
        "description": "Max effort and dynamic effort rotation.",
        "days_per_week": 4,
        "sessions_per_day": 1,
    },
    {
        "slug": TrackKind.ENDURE.value,
        "name": "Endure",
        "description": "Aerobic base building across zones.",
        "days_per_week": 5,
        "sessions_per_day": 1,
    },
    {
        "slug": TrackKind.BUILD.value,
        "name": "Build",
        "description": "Hypertrophy split.",
        "days_per_week": 5,
        "sessions_per_day": 1,
    },
    {
        "slug": TrackKind.FOUNDATIONS.value,
        "name": "Foundations",
        "description": "Movement fundamentals for newer athletes.",
        "days_per_week": 4,
        "sessions_per_day": 1,
    },
    {
        "slug": TrackKind.MINIMAL_GEAR.value,
        "name": "Minimal Gear",
        "description": "Short conditioning pieces with little equipment.",
        "days_per_week": 5,
        "sessions_per_day": 1,
    },
    {
        "slug": TrackKind.RECOVER_MOBILIZE.value,
        "name": "Recover & Mobilize",
        "description": "Daily mobility and breathing work.",
        "days_per_week": 7,
        "sessions_per_day": 1,
    },
]


async def seed_tracks(session: AsyncSession) -> int:
    """Insert canonical tracks that do not exist yet. Returns the number inserted."""
    repo = TrackRepository(session)
    created = 0
    for display_order, data in enumerate(CANONICAL_TRACKS, start=1):
        if await repo.get_by_slug(data["slug"]) is not None:
            continue
        await repo.create(Track(display_order=display_order, is_active=True, **data))
        created += 1

    logger.info(f"Seeded {created} tracks")
    return created

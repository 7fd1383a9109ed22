"""Tests for repository lookups used by generation and the read API."""
import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from app.models import Exercise, TrainingSession
from app.repositories.exercise_repository import ExerciseRepository
from app.repositories.session_repository import SessionRepository
from app.repositories.track_repository import TrackRepository


@pytest_asyncio.fixture
async def catalog(async_db_session):
    repo = ExerciseRepository(async_db_session)
    for name in ("Deadlift", "Romanian Deadlift", "Pull-ups", "Chest-to-Bar Pull-ups"):
        await repo.create(Exercise(name=name, category="Olympic Lift", equipment=["barbell"]))
    await async_db_session.commit()
    return repo


class TestExerciseRepository:
    @pytest.mark.asyncio
    async def test_fuzzy_lookup_returns_oldest_containing_row(self, catalog):
        assert (await catalog.find_by_fuzzy_name("deadlift")).name == "Deadlift"
        assert (await catalog.find_by_fuzzy_name("pull-ups")).name == "Pull-ups"
        assert (await catalog.find_by_fuzzy_name("Chest-to-Bar")).name == "Chest-to-Bar Pull-ups"

    @pytest.mark.asyncio
    async def test_fuzzy_lookup_miss(self, catalog):
        assert await catalog.find_by_fuzzy_name("Snatch") is None


class TestTrackAndSessionRepositories:
    @pytest.mark.asyncio
    async def test_active_tracks_ordered(self, seeded_db_session):
        tracks = await TrackRepository(seeded_db_session).list_active()

        assert len(tracks) == 8
        assert [t.display_order for t in tracks] == list(range(1, 9))

    @pytest.mark.asyncio
    async def test_coordinate_lookup_distinguishes_sub_sessions(self, seeded_db_session):
        track = await TrackRepository(seeded_db_session).get_by_slug("compete")
        repo = SessionRepository(seeded_db_session)
        for label in ("AM", "PM"):
            await repo.create(
                TrainingSession(
                    track_id=track.id,
                    week_number=1,
                    day_of_week=1,
                    sub_session_label=label,
                    name=f"Week 1 - Max Strength - {label}",
                    focus="max_strength",
                    session_type="Strength",
                    duration_minutes=90,
                    intensity_level=9,
                )
            )
        await seeded_db_session.commit()

        am = await repo.get_by_coordinate(track.id, 1, 1, "AM")
        pm = await repo.get_by_coordinate(track.id, 1, 1, "PM")

        assert am.name.endswith("AM")
        assert pm.name.endswith("PM")
        assert await repo.get_by_coordinate(track.id, 1, 1) is None

    @pytest.mark.asyncio
    async def test_single_session_day_rejects_second_row(self, seeded_db_session):
        track = await TrackRepository(seeded_db_session).get_by_slug("foundations")
        track_id = track.id
        repo = SessionRepository(seeded_db_session)

        def single_session(name: str) -> TrainingSession:
            return TrainingSession(
                track_id=track_id,
                week_number=1,
                day_of_week=1,
                sub_session_label=None,
                name=name,
                focus="foundation_movement",
                session_type="Foundation",
                duration_minutes=45,
                intensity_level=3,
            )

        await repo.create(single_session("Week 1 - Foundations"))
        await seeded_db_session.commit()

        with pytest.raises(IntegrityError):
            await repo.create(single_session("Week 1 - Foundations (copy)"))
            await seeded_db_session.commit()
        await seeded_db_session.rollback()

        rows = await repo.list_for_track(track_id, week_number=1, day_of_week=1, published_only=False)
        assert [s.name for s in rows] == ["Week 1 - Foundations"]

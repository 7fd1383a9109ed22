"""Tests for the track template resolver."""
import pytest

from app.core.exceptions import UnknownTrackKindError
from app.models.enums import SessionType, SubSessionLabel, TrackKind
from app.services.track_templates import (
    WEEK_PLAN_BUILDERS,
    get_week_plan,
    resolve_track_kind,
    resolve_week_plan,
)


class TestResolveTrackKind:
    def test_known_slugs_resolve(self):
        for kind in TrackKind:
            assert resolve_track_kind(kind.value) is kind

    def test_unknown_slug_raises(self):
        with pytest.raises(UnknownTrackKindError) as exc_info:
            resolve_track_kind("powerlifting")

        assert exc_info.value.slug == "powerlifting"
        assert exc_info.value.details["stage"] == "template"

    def test_every_kind_has_a_builder(self):
        assert set(WEEK_PLAN_BUILDERS) == set(TrackKind)


class TestWeekPlans:
    def test_medeiros_method_is_balanced_six_day(self):
        plan = get_week_plan(TrackKind.MEDEIROS_METHOD)

        assert [d.focus for d in plan] == [
            "upper_strength",
            "lower_strength",
            "olympic_skill",
            "mixed_modal",
            "gymnastics",
            "endurance",
        ]
        assert [d.intensity for d in plan] == [8, 8, 6, 9, 7, 6]
        assert [d.duration_minutes for d in plan] == [60, 65, 55, 50, 55, 45]

    def test_compete_is_twice_daily(self):
        plan = get_week_plan(TrackKind.COMPETE)

        assert len(plan) == 13
        for day in range(1, 7):
            labels = [d.sub_session for d in plan if d.day == day]
            assert labels == [SubSessionLabel.AM, SubSessionLabel.PM]

        day_seven = [d for d in plan if d.day == 7]
        assert len(day_seven) == 1
        assert day_seven[0].focus == "active_recovery"
        assert day_seven[0].sub_session is None

    def test_compete_coordinates_are_unique(self):
        plan = get_week_plan(TrackKind.COMPETE)
        coordinates = [(d.day, d.sub_session) for d in plan]

        assert len(coordinates) == len(set(coordinates))

    def test_conjugate_rotation(self):
        plan = get_week_plan(TrackKind.CONJUGATE_STRENGTH)

        assert [(d.day, d.focus, d.intensity) for d in plan] == [
            (1, "max_effort_upper", 9),
            (2, "max_effort_lower", 9),
            (3, "dynamic_effort_upper", 7),
            (4, "dynamic_effort_lower", 7),
        ]
        assert all(d.duration_minutes == 75 for d in plan)
        assert all(d.session_type is SessionType.STRENGTH for d in plan)

    def test_endure(self):
        plan = get_week_plan(TrackKind.ENDURE)

        assert [(d.focus, d.intensity, d.duration_minutes) for d in plan] == [
            ("zone2", 4, 60),
            ("tempo", 7, 45),
            ("intervals", 8, 50),
            ("long_distance", 5, 90),
            ("recovery", 3, 30),
        ]
        assert all(d.session_type is SessionType.ENDURANCE for d in plan)

    def test_foundations(self):
        plan = resolve_week_plan("foundations")

        assert len(plan) == 4
        assert [d.day for d in plan] == [1, 2, 3, 4]
        for day in plan:
            assert day.focus == "foundation_movement"
            assert day.intensity == 3
            assert day.duration_minutes == 45
            assert day.session_type is SessionType.FOUNDATION

    @pytest.mark.parametrize(
        "kind, days, intensity, duration, session_type",
        [
            (TrackKind.BUILD, 5, 6, 75, SessionType.HYPERTROPHY),
            (TrackKind.MINIMAL_GEAR, 5, 7, 25, SessionType.CONDITIONING),
            (TrackKind.RECOVER_MOBILIZE, 7, 1, 15, SessionType.RECOVERY),
        ],
    )
    def test_uniform_tracks(self, kind, days, intensity, duration, session_type):
        plan = get_week_plan(kind)

        assert [d.day for d in plan] == list(range(1, days + 1))
        assert {d.intensity for d in plan} == {intensity}
        assert {d.duration_minutes for d in plan} == {duration}
        assert {d.session_type for d in plan} == {session_type}

    def test_days_and_intensities_in_range(self):
        for kind in TrackKind:
            for day in get_week_plan(kind):
                assert 1 <= day.day <= 7
                assert 1 <= day.intensity <= 10
                assert day.duration_minutes > 0

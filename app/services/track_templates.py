"""
Track template resolver.

Maps a track slug to its hand-authored weekly skeleton. Each track kind has
exactly one builder in ``WEEK_PLAN_BUILDERS``; an unknown slug is an error,
the resolver never falls back to a default template.
"""

from __future__ import annotations

from typing import Callable

from app.core.exceptions import UnknownTrackKindError
from app.models.enums import SessionType, SubSessionLabel, TrackKind
from app.services.generation_types import DayTemplate, WeekPlan

AM = SubSessionLabel.AM
PM = SubSessionLabel.PM


def resolve_track_kind(slug: str) -> TrackKind:
    try:
        return TrackKind(slug)
    except ValueError:
        raise UnknownTrackKindError(slug) from None


def _medeiros_method() -> WeekPlan:
    return WeekPlan((
        DayTemplate(1, "upper_strength", 8, 60, SessionType.STRENGTH),
        DayTemplate(2, "lower_strength", 8, 65, SessionType.STRENGTH),
        DayTemplate(3, "olympic_skill", 6, 55, SessionType.SKILL),
        DayTemplate(4, "mixed_modal", 9, 50, SessionType.CONDITIONING),
        DayTemplate(5, "gymnastics", 7, 55, SessionType.SKILL),
        DayTemplate(6, "endurance", 6, 45, SessionType.CONDITIONING),
    ))


def _compete() -> WeekPlan:
    return WeekPlan((
        DayTemplate(1, "max_strength", 9, 90, SessionType.STRENGTH, AM),
        DayTemplate(1, "conditioning", 8, 60, SessionType.CONDITIONING, PM),
        DayTemplate(2, "olympic_heavy", 9, 90, SessionType.SKILL, AM),
        DayTemplate(2, "gymnastics", 7, 60, SessionType.SKILL, PM),
        DayTemplate(3, "squat_strength", 8, 90, SessionType.STRENGTH, AM),
        DayTemplate(3, "sprint_conditioning", 9, 45, SessionType.CONDITIONING, PM),
        DayTemplate(4, "upper_strength", 8, 90, SessionType.STRENGTH, AM),
        DayTemplate(4, "mixed_modal", 8, 60, SessionType.CONDITIONING, PM),
        DayTemplate(5, "deadlift_strength", 8, 90, SessionType.STRENGTH, AM),
        DayTemplate(5, "endurance", 6, 60, SessionType.CONDITIONING, PM),
        DayTemplate(6, "competition_simulation", 9, 120, SessionType.CONDITIONING, AM),
        DayTemplate(6, "recovery", 3, 30, SessionType.RECOVERY, PM),
        DayTemplate(7, "active_recovery", 4, 45, SessionType.RECOVERY),
    ))


CONJUGATE_ROTATION = ("max_effort_upper", "max_effort_lower", "dynamic_effort_upper", "dynamic_effort_lower")


def _conjugate_strength() -> WeekPlan:
    days = []
    for day in range(1, len(CONJUGATE_ROTATION) + 1):
        focus = CONJUGATE_ROTATION[(day - 1) % len(CONJUGATE_ROTATION)]
        intensity = 9 if focus.startswith("max_effort") else 7
        days.append(DayTemplate(day, focus, intensity, 75, SessionType.STRENGTH))
    return WeekPlan(tuple(days))


def _endure() -> WeekPlan:
    endurance_types = [
        ("zone2", 4, 60),
        ("tempo", 7, 45),
        ("intervals", 8, 50),
        ("long_distance", 5, 90),
        ("recovery", 3, 30),
    ]
    return WeekPlan(tuple(
        DayTemplate(index + 1, focus, intensity, duration, SessionType.ENDURANCE)
        for index, (focus, intensity, duration) in enumerate(endurance_types)
    ))


def _build() -> WeekPlan:
    splits = ["push", "pull", "legs", "upper", "lower"]
    return WeekPlan(tuple(
        DayTemplate(index + 1, split, 6, 75, SessionType.HYPERTROPHY)
        for index, split in enumerate(splits)
    ))


def _foundations() -> WeekPlan:
    return WeekPlan(tuple(
        DayTemplate(day, "foundation_movement", 3, 45, SessionType.FOUNDATION)
        for day in range(1, 5)
    ))


def _minimal_gear() -> WeekPlan:
    formats = ["emom", "amrap", "for_time", "intervals", "tabata"]
    return WeekPlan(tuple(
        DayTemplate(index + 1, fmt, 7, 25, SessionType.CONDITIONING)
        for index, fmt in enumerate(formats)
    ))


def _recover_mobilize() -> WeekPlan:
    focuses = ["shoulders", "hips", "spine", "ankles", "full_body", "breathing", "recovery"]
    return WeekPlan(tuple(
        DayTemplate(index + 1, focus, 1, 15, SessionType.RECOVERY)
        for index, focus in enumerate(focuses)
    ))


WEEK_PLAN_BUILDERS: dict[TrackKind, Callable[[], WeekPlan]] = {
    TrackKind.MEDEIROS_METHOD: _medeiros_method,
    TrackKind.COMPETE: _compete,
    TrackKind.CONJUGATE_STRENGTH: _conjugate_strength,
    TrackKind.ENDURE: _endure,
    TrackKind.BUILD: _build,
    TrackKind.FOUNDATIONS: _foundations,
    TrackKind.MINIMAL_GEAR: _minimal_gear,
    TrackKind.RECOVER_MOBILIZE: _recover_mobilize,
}


def get_week_plan(kind: TrackKind) -> WeekPlan:
    return WEEK_PLAN_BUILDERS[kind]()


def resolve_week_plan(slug: str) -> WeekPlan:
    """Resolve a slug straight to its weekly skeleton."""
    return get_week_plan(resolve_track_kind(slug))

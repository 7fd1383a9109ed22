"""
Generation Types

Intermediate structures passed between the generator stages. None of these
are persisted directly: the session writer turns a PlannedSession into
sessions / blocks / block_exercises rows and the structures are discarded.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from app.models.enums import BlockType, LoadType, SessionType, SubSessionLabel


@dataclass(frozen=True)
class DayTemplate:
    """One training slot in a track's weekly skeleton."""

    day: int  # 1-7
    focus: str
    intensity: int  # 1-10
    duration_minutes: int
    session_type: SessionType
    sub_session: SubSessionLabel | None = None


@dataclass(frozen=True)
class WeekPlan:
    """Ordered day templates for one week of a track."""

    days: tuple[DayTemplate, ...]

    def __iter__(self):
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)


@dataclass
class ExerciseAssignment:
    exercise_name: str
    category: str
    sets: int | None = None
    reps: str | None = None
    duration_seconds: int | None = None
    load_type: LoadType = LoadType.NONE
    load_value: float | None = None
    rest_seconds: int | None = None
    notes: str | None = None
    scaling_notes: str | None = None


@dataclass
class PlannedBlock:
    block_type: BlockType
    name: str
    sequence: int
    duration_minutes: int
    exercises: list[ExerciseAssignment] = field(default_factory=list)


@dataclass
class PlannedSession:
    """A fully resolved session ready to be written."""

    week_number: int
    template: DayTemplate
    name: str
    blocks: list[PlannedBlock] = field(default_factory=list)


@dataclass
class GeneratorContext:
    """Mutable state scoped to a single generate() invocation.

    Never shared between invocations, so concurrent generation for different
    tracks cannot influence each other's rotation.
    """

    rng: random.Random = field(default_factory=random.Random)
    used_exercises: set[str] = field(default_factory=set)

    @classmethod
    def seeded(cls, seed: int | None) -> GeneratorContext:
        return cls(rng=random.Random(seed))

    def finish_week(self, week_number: int) -> None:
        # Forget primary movements every 2 weeks to reintroduce variety
        if week_number % 2 == 0:
            self.used_exercises.clear()

"""Pydantic schemas for tracks and their generated sessions."""
from datetime import datetime

from pydantic import BaseModel, Field


class TrackResponse(BaseModel):
    id: int
    slug: str
    name: str
    description: str | None = None
    days_per_week: int
    sessions_per_day: int
    display_order: int
    is_active: bool

    class Config:
        from_attributes = True


class ExerciseResponse(BaseModel):
    id: int
    name: str
    category: str | None = None
    equipment: list[str] | None = None
    skill_level: str | None = None

    class Config:
        from_attributes = True


class BlockExerciseResponse(BaseModel):
    id: int
    sequence: int
    sets: int | None = None
    reps: str | None = None
    duration_seconds: int | None = None
    load_type: str
    load_value: float | None = None
    rest_seconds: int | None = None
    notes: str | None = None
    scaling_notes: str | None = None
    exercise: ExerciseResponse

    class Config:
        from_attributes = True


class BlockResponse(BaseModel):
    id: int
    block_type: str
    name: str
    sequence: int
    duration_minutes: int | None = None
    exercises: list[BlockExerciseResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class SessionResponse(BaseModel):
    """A generated session with its ordered blocks and exercises."""
    id: int
    track_id: int
    week_number: int
    day_of_week: int
    sub_session_label: str | None = None
    name: str
    focus: str | None = None
    session_type: str
    duration_minutes: int | None = None
    intensity_level: int | None = None
    is_published: bool
    created_at: datetime | None = None
    blocks: list[BlockResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class WeekCoverage(BaseModel):
    week_number: int
    sessions: int
    days_covered: list[int]
    missing_days: list[int] = Field(default_factory=list)


class CoverageReport(BaseModel):
    """Which weeks of a track have been generated and how completely."""
    track: str
    track_name: str
    expected_sessions_per_week: int
    total_sessions: int
    week_range: str | None = None
    missing_weeks: list[int] = Field(default_factory=list)
    weeks: list[WeekCoverage] = Field(default_factory=list)

"""Pydantic schemas for the generate endpoint and service result."""
from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Body of POST /tracks/{slug}/generate.

    Ranges are checked by the generator so out-of-range values come back in
    the domain error envelope.
    """
    start_week: int = Field(default=1, description="First week number to generate, >= 1")
    week_count: int = Field(default=1, description="Number of consecutive weeks, >= 1")


class GeneratedSessionSummary(BaseModel):
    session_id: int
    name: str
    day: int
    sub_session: str | None = None
    focus: str
    blocks_created: int


class GenerationResult(BaseModel):
    """Outcome of one generate() call."""
    track: str
    track_name: str
    start_week: int
    weeks_generated: int
    workouts_created: int
    sessions: list[GeneratedSessionSummary] = Field(default_factory=list)

"""Repositories package."""
from app.repositories.base import Repository
from app.repositories.exercise_repository import ExerciseRepository
from app.repositories.session_repository import SessionRepository
from app.repositories.track_repository import TrackRepository

__all__ = [
    "Repository",
    "ExerciseRepository",
    "SessionRepository",
    "TrackRepository",
]

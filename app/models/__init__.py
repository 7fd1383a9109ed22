"""Database models."""
from app.models.exercise import Exercise
from app.models.session import Block, BlockExercise, TrainingSession
from app.models.track import Track

__all__ = [
    "Block",
    "BlockExercise",
    "Exercise",
    "TrainingSession",
    "Track",
]

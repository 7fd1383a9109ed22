"""Persisted sessions, blocks and block exercises."""
from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import relationship

from app.db.database import Base


class TrainingSession(Base):
    """One generated workout for a (track, week, day, sub-session) coordinate."""
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    track_id = Column(
        Integer,
        ForeignKey("tracks.id", ondelete="CASCADE"),
        nullable=False,
    )
    week_number = Column(Integer, nullable=False)
    day_of_week = Column(Integer, nullable=False)
    sub_session_label = Column(String(8), nullable=True)  # AM / PM on twice-daily tracks

    name = Column(String(200), nullable=False)
    focus = Column(String(64), nullable=False)
    session_type = Column(String(32), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    intensity_level = Column(Integer, nullable=False)
    is_published = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC))

    track = relationship("Track", back_populates="sessions")
    blocks = relationship(
        "Block",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="Block.sequence",
    )

    __table_args__ = (
        UniqueConstraint(
            "track_id", "week_number", "day_of_week", "sub_session_label",
            name="uq_session_coordinate",
        ),
        # NULL labels are distinct under the constraint above
        Index(
            "uq_session_single_slot",
            "track_id", "week_number", "day_of_week",
            unique=True,
            sqlite_where=text("sub_session_label IS NULL"),
            postgresql_where=text("sub_session_label IS NULL"),
        ),
        Index("idx_sessions_track_week", "track_id", "week_number"),
    )

    def __repr__(self) -> str:
        return (
            f"<TrainingSession(id={self.id}, track_id={self.track_id}, "
            f"week={self.week_number}, day={self.day_of_week}, label={self.sub_session_label})>"
        )


class Block(Base):
    __tablename__ = "blocks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(
        Integer,
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    block_type = Column(String(32), nullable=False)
    name = Column(String(120), nullable=False)
    sequence = Column(Integer, nullable=False)
    duration_minutes = Column(Integer, nullable=True)

    session = relationship("TrainingSession", back_populates="blocks")
    exercises = relationship(
        "BlockExercise",
        back_populates="block",
        cascade="all, delete-orphan",
        order_by="BlockExercise.sequence",
    )

    __table_args__ = (
        UniqueConstraint("session_id", "sequence", name="uq_block_sequence"),
    )


class BlockExercise(Base):
    """An exercise assignment inside a block."""
    __tablename__ = "block_exercises"

    id = Column(Integer, primary_key=True, autoincrement=True)
    block_id = Column(
        Integer,
        ForeignKey("blocks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False)
    sequence = Column(Integer, nullable=False)

    sets = Column(Integer, nullable=True)
    reps = Column(String(64), nullable=True)
    duration_seconds = Column(Integer, nullable=True)
    load_type = Column(String(16), nullable=False, default="none")
    load_value = Column(Float, nullable=True)
    rest_seconds = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    scaling_notes = Column(Text, nullable=True)

    block = relationship("Block", back_populates="exercises")
    exercise = relationship("Exercise")

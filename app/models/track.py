"""Training track model."""
from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.database import Base


class Track(Base):
    """A named program archetype. Read-only input to the generator."""
    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)

    # Expected weekly shape, used by the coverage report
    days_per_week = Column(Integer, nullable=False, default=5)
    sessions_per_day = Column(Integer, nullable=False, default=1)

    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC))

    sessions = relationship("TrainingSession", back_populates="track")

    def __repr__(self) -> str:
        return f"<Track(id={self.id}, slug='{self.slug}')>"

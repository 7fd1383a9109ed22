"""Shared exercise catalog model."""
from datetime import UTC, datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String

from app.db.database import Base


class Exercise(Base):
    """Catalog entry referenced by block exercises.

    The generator only ever creates or reuses rows here, it never deletes.
    """
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, index=True)
    category = Column(String(64), nullable=True)
    equipment = Column(JSON, nullable=False, default=list)
    skill_level = Column(String(32), nullable=False, default="Intermediate")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC))

    def __repr__(self) -> str:
        return f"<Exercise(id={self.id}, name='{self.name}')>"

"""Planned visit model."""
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base


class PlannedVisit(Base):
    """A user's intent to be at a court at a future time."""

    __tablename__ = "planned_visits"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    court_id = Column(Integer, ForeignKey("courts.id", ondelete="CASCADE"), nullable=False, index=True)
    planned_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False)

    # Relationships
    court = relationship("Court", back_populates="planned_visits")

    __table_args__ = (
        Index("ix_planned_visits_court_time", "court_id", "planned_time"),
        UniqueConstraint("user_id", "court_id", "planned_time", name="uq_planned_visit_slot"),
    )

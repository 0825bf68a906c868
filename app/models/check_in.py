"""Check-in model."""
from datetime import datetime
from sqlalchemy import Column, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base


class CheckIn(Base):
    """A user's presence at a court, valid until ``expires_at``.

    Rows are never updated. An expired row may still exist until the janitor
    sweeps it, so read paths must use :meth:`is_active` rather than row
    existence.
    """

    __tablename__ = "check_ins"

    id = Column(Integer, primary_key=True, index=True)
    # One row per user: a concurrent second insert fails at the database.
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    court_id = Column(Integer, ForeignKey("courts.id", ondelete="CASCADE"), nullable=False, index=True)
    checked_in_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)

    # Relationships
    court = relationship("Court", back_populates="check_ins")

    def is_active(self, now: datetime) -> bool:
        return self.expires_at > now

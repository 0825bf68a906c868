"""Court model."""
from sqlalchemy import Column, Integer, String, Float, Text, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base, utcnow


class Court(Base):
    """Represents a pickleball court location."""

    __tablename__ = "courts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, onupdate=utcnow)

    # Relationships
    check_ins = relationship("CheckIn", back_populates="court", cascade="all, delete-orphan")
    planned_visits = relationship("PlannedVisit", back_populates="court", cascade="all, delete-orphan")

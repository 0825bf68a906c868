"""User model."""
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from app.core.database import Base, utcnow


class User(Base):
    """Represents an app user. Only display fields are read by this service."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=True, index=True)
    selected_court_id = Column(Integer, ForeignKey("courts.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=utcnow)

"""Blocked user model."""
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Index, UniqueConstraint
from app.core.database import Base


class BlockedUser(Base):
    """Directional fact: ``user_id`` has blocked ``blocked_user_id``."""

    __tablename__ = "blocked_users"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    blocked_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "blocked_user_id", name="uq_blocked_users_pair"),
        Index("ix_blocked_users_blocked_user", "blocked_user_id", "user_id"),
    )

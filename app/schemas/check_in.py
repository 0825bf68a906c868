"""Check-in schemas."""
from pydantic import BaseModel, ConfigDict
from datetime import datetime

from app.schemas.user import UserSummary


class CheckInInDB(BaseModel):
    """Schema for check-in from database."""

    id: int
    user_id: int
    court_id: int
    checked_in_at: datetime
    expires_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CheckInWithUser(CheckInInDB):
    """Check-in joined with its owner's display fields."""

    user: UserSummary


class CleanupResult(BaseModel):
    """Result of an expired check-in sweep."""

    deleted_count: int

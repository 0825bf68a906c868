"""Planned visit schemas."""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import List
from datetime import datetime

from app.core.database import to_naive_utc
from app.schemas.user import UserSummary


class PlannedVisitCreate(BaseModel):
    """Schema for planning a visit."""

    planned_time: datetime

    @field_validator("planned_time")
    @classmethod
    def normalize_planned_time(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class PlannedVisitInDB(BaseModel):
    """Schema for planned visit from database."""

    id: int
    user_id: int
    court_id: int
    planned_time: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PlannedVisitWithUser(PlannedVisitInDB):
    """Planned visit joined with its owner's display fields."""

    user: UserSummary


class VisitSlot(BaseModel):
    """All visible visits planned for the same time."""

    planned_time: datetime
    visits: List[PlannedVisitWithUser]

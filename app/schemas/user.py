"""User schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: Optional[str] = None
    email: Optional[str] = None


class UserSummary(BaseModel):
    """Display fields of another user shown next to their check-ins and visits."""

    id: int
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserInDB(UserSummary):
    """Schema for user from database."""

    selected_court_id: Optional[int] = None
    created_at: Optional[datetime] = None


class SelectedCourtUpdate(BaseModel):
    """Schema for changing the user's selected court."""

    court_id: int

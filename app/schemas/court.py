"""Court schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class CourtBase(BaseModel):
    """Base court schema."""

    name: str
    latitude: float
    longitude: float
    notes: Optional[str] = None


class CourtCreate(CourtBase):
    """Schema for creating a court."""

    pass


class CourtNotesUpdate(BaseModel):
    """Schema for updating court notes."""

    notes: Optional[str] = None


class CourtInDB(CourtBase):
    """Schema for court from database."""

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

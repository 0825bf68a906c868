"""Blocked user schemas."""
from pydantic import BaseModel


class BlockCreate(BaseModel):
    """Schema for blocking a user."""

    blocked_user_id: int


class BlockStatus(BaseModel):
    """Block facts between the caller and a target user, in each direction."""

    is_blocked: bool
    is_blocked_by: bool

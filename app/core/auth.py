"""Caller identity dependencies.

Authentication itself lives outside this service; upstream middleware is
expected to put the signed-in user's id in the ``X-User-Id`` header. Routes
receive the id explicitly and pass it down to the services.
"""
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import NotAuthenticated
from app.models.user import User


async def get_optional_user_id(
    x_user_id: Optional[int] = Header(default=None),
) -> Optional[int]:
    """Caller id if one was supplied, else None (guest read)."""
    return x_user_id


async def get_current_user_id(
    x_user_id: Optional[int] = Header(default=None),
    db: AsyncSession = Depends(get_db),
) -> int:
    """Caller id for routes that require a signed-in user."""
    if x_user_id is None:
        raise NotAuthenticated()

    user = await db.get(User, x_user_id)
    if user is None:
        raise NotAuthenticated("Unknown user")

    return user.id

"""Blocked user endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user_id
from app.core.database import get_db
from app.schemas.block import BlockCreate, BlockStatus
from app.schemas.user import UserSummary
from app.services.block_service import block_service

router = APIRouter(prefix="/blocked-users", tags=["blocked-users"])


@router.post("", status_code=204)
async def block_user(
    block: BlockCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Block a user.

    Blocked users and the caller stop seeing each other's check-ins and
    planned visits. Blocking twice is harmless.
    """
    await block_service.block(db, user_id, block.blocked_user_id)


@router.delete("/{blocked_user_id}", status_code=204)
async def unblock_user(
    blocked_user_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Unblock a user. Unblocking someone who is not blocked is harmless."""
    await block_service.unblock(db, user_id, blocked_user_id)


@router.get("", response_model=List[UserSummary])
async def list_blocked_users(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List users the caller has blocked."""
    return await block_service.list_blocked(db, user_id)


@router.get("/{target_user_id}/status", response_model=BlockStatus)
async def get_block_status(
    target_user_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Whether the caller blocked the target, and whether the target blocked the caller."""
    return await block_service.get_status(db, user_id, target_user_id)

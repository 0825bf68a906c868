"""Check-in endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user_id, get_optional_user_id
from app.core.database import get_db
from app.schemas.check_in import CheckInInDB, CheckInWithUser
from app.services.check_in_service import check_in_service

router = APIRouter(tags=["check-ins"])


@router.post("/courts/{court_id}/check-ins", response_model=CheckInInDB, status_code=201)
async def check_in(
    court_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Check the caller in at a court for the next two hours.

    Fails with 409 if the caller is already checked in somewhere.

    Args:
        court_id: Court ID
        user_id: Caller
        db: Database session

    Returns:
        Created check-in
    """
    return await check_in_service.check_in(db, user_id, court_id)


@router.delete("/check-ins/me", status_code=204)
async def check_out(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Check the caller out."""
    await check_in_service.check_out(db, user_id)


@router.get("/check-ins/me", response_model=Optional[CheckInInDB])
async def get_my_check_in(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's active check-in, or null."""
    return await check_in_service.get_current(db, user_id)


@router.get("/courts/{court_id}/check-ins", response_model=List[CheckInWithUser])
async def list_check_ins(
    court_id: int,
    viewer_id: Optional[int] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    List who is currently checked in at a court.

    Signed-in callers do not see users they have blocked or who blocked them.
    Guests see everyone.
    """
    return await check_in_service.list_active(db, court_id, viewer_id)

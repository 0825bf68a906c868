"""Planned visit endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user_id, get_optional_user_id
from app.core.database import get_db
from app.schemas.planned_visit import (
    PlannedVisitCreate,
    PlannedVisitInDB,
    PlannedVisitWithUser,
    VisitSlot,
)
from app.services.planned_visit_service import planned_visit_service

router = APIRouter(tags=["planned-visits"])


@router.post(
    "/courts/{court_id}/planned-visits",
    response_model=PlannedVisitInDB,
    status_code=201,
)
async def create_planned_visit(
    court_id: int,
    visit: PlannedVisitCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Plan a visit to a court.

    Args:
        court_id: Court ID
        visit: Planned time (UTC)
        user_id: Caller
        db: Database session

    Returns:
        Created planned visit
    """
    return await planned_visit_service.create(db, user_id, court_id, visit.planned_time)


@router.delete("/planned-visits/{visit_id}", status_code=204)
async def delete_planned_visit(
    visit_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Cancel one of the caller's planned visits."""
    await planned_visit_service.delete(db, user_id, visit_id)


@router.get("/courts/{court_id}/planned-visits", response_model=List[PlannedVisitWithUser])
async def list_planned_visits(
    court_id: int,
    viewer_id: Optional[int] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List upcoming visits at a court, earliest first, hiding blocked users."""
    return await planned_visit_service.list_for_court(db, court_id, viewer_id)


@router.get("/courts/{court_id}/planned-visits/slots", response_model=List[VisitSlot])
async def list_planned_visit_slots(
    court_id: int,
    viewer_id: Optional[int] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Same as the visit listing, grouped by planned time."""
    visits = await planned_visit_service.list_for_court(db, court_id, viewer_id)
    return planned_visit_service.group_into_slots(visits)


@router.get("/courts/{court_id}/planned-visits/me", response_model=List[PlannedVisitInDB])
async def list_my_planned_visits(
    court_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's own upcoming visits at a court."""
    return await planned_visit_service.list_for_user(db, user_id, court_id)

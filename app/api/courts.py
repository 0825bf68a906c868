"""Court endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_optional_user_id
from app.core.config import settings
from app.core.database import get_db
from app.models.court import Court
from app.models.user import User
from app.schemas.court import CourtCreate, CourtNotesUpdate, CourtInDB

router = APIRouter(prefix="/courts", tags=["courts"])


@router.post("", response_model=CourtInDB, status_code=201)
async def create_court(
    court: CourtCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new court.

    Args:
        court: Court data
        db: Database session

    Returns:
        Created court
    """
    # Check if court already exists
    result = await db.execute(select(Court).where(Court.name == court.name))
    existing_court = result.scalars().first()

    if existing_court:
        raise HTTPException(
            status_code=400,
            detail=f"Court '{court.name}' already exists (ID: {existing_court.id})",
        )

    db_court = Court(**court.model_dump())
    db.add(db_court)
    await db.commit()
    await db.refresh(db_court)

    return db_court


@router.get("", response_model=List[CourtInDB])
async def list_courts(
    skip: int = 0,
    limit: int = 100,
    db: AsyncSession = Depends(get_db),
):
    """
    List all courts.

    Args:
        skip: Number of records to skip
        limit: Maximum number of records to return
        db: Database session

    Returns:
        List of courts
    """
    result = await db.execute(
        select(Court).order_by(Court.id).offset(skip).limit(limit)
    )
    return result.scalars().all()


@router.get("/default", response_model=Optional[CourtInDB])
async def get_default_court(
    viewer_id: Optional[int] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Get the court the app should open on.

    Uses the caller's selected court when there is one, otherwise the
    configured default court, otherwise the first court. Returns null when
    no courts exist.
    """
    if viewer_id is not None:
        user = await db.get(User, viewer_id)
        if user and user.selected_court_id:
            selected = await db.get(Court, user.selected_court_id)
            if selected:
                return selected

    result = await db.execute(
        select(Court).where(Court.name == settings.DEFAULT_COURT_NAME)
    )
    court = result.scalars().first()
    if court:
        return court

    result = await db.execute(select(Court).order_by(Court.id).limit(1))
    return result.scalars().first()


@router.get("/{court_id}", response_model=CourtInDB)
async def get_court(
    court_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific court by ID."""
    court = await db.get(Court, court_id)

    if not court:
        raise HTTPException(status_code=404, detail="Court not found")

    return court


@router.patch("/{court_id}/notes", response_model=CourtInDB)
async def update_court_notes(
    court_id: int,
    update: CourtNotesUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update a court's notes.

    Args:
        court_id: Court ID
        update: New notes, or null to clear them
        db: Database session

    Returns:
        Updated court
    """
    court = await db.get(Court, court_id)

    if not court:
        raise HTTPException(status_code=404, detail="Court not found")

    court.notes = update.notes
    await db.commit()
    await db.refresh(court)

    return court

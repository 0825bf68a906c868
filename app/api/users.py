"""User endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user_id
from app.core.database import get_db
from app.models.court import Court
from app.models.user import User
from app.schemas.user import UserCreate, UserInDB, SelectedCourtUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserInDB, status_code=201)
async def create_user(
    user: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a user.

    Sign-in is handled upstream; this only records the display fields the
    service shows next to check-ins and planned visits.
    """
    if user.email:
        result = await db.execute(select(User).where(User.email == user.email))
        if result.scalars().first():
            raise HTTPException(
                status_code=400,
                detail=f"User with email {user.email} already exists",
            )

    db_user = User(**user.model_dump())
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)

    return db_user


@router.get("/me", response_model=UserInDB)
async def get_me(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's own user record."""
    return await db.get(User, user_id)


@router.put("/me/selected-court", response_model=UserInDB)
async def update_selected_court(
    update: SelectedCourtUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Remember which court the caller last selected.

    Args:
        update: Court to select
        user_id: Caller
        db: Database session

    Returns:
        Updated user
    """
    if await db.get(Court, update.court_id) is None:
        raise HTTPException(status_code=404, detail="Court not found")

    user = await db.get(User, user_id)
    user.selected_court_id = update.court_id
    await db.commit()
    await db.refresh(user)

    return user

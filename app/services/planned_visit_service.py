"""Planned visit service for future court visits."""
import logging
from datetime import datetime
from itertools import groupby
from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import to_naive_utc, utcnow
from app.core.exceptions import DuplicateSlot, Forbidden, NotFound, PastTime
from app.models.court import Court
from app.models.planned_visit import PlannedVisit
from app.models.user import User
from app.schemas.planned_visit import PlannedVisitInDB, PlannedVisitWithUser, VisitSlot
from app.schemas.user import UserSummary
from app.services.visibility import filter_visible

logger = logging.getLogger(__name__)


class PlannedVisitService:
    """Service for managing planned visits."""

    async def create(
        self,
        db: AsyncSession,
        user_id: int,
        court_id: int,
        planned_time: datetime,
        now: Optional[datetime] = None,
    ) -> PlannedVisit:
        """
        Plan a visit to a court.

        Args:
            db: Database session
            user_id: User planning the visit
            court_id: Court ID
            planned_time: When the user intends to arrive (aware values are converted to naive UTC)
            now: Current time (defaults to UTC now)

        Returns:
            Created planned visit

        Raises:
            NotFound: If the court does not exist
            PastTime: If ``planned_time`` is before now
            DuplicateSlot: If the user already planned this court at this exact time
        """
        now = now or utcnow()
        planned_time = to_naive_utc(planned_time)

        if await db.get(Court, court_id) is None:
            raise NotFound("Court not found")

        if planned_time < now:
            raise PastTime()

        result = await db.execute(
            select(PlannedVisit.id).where(
                and_(
                    PlannedVisit.user_id == user_id,
                    PlannedVisit.court_id == court_id,
                    PlannedVisit.planned_time == planned_time,
                )
            )
        )
        if result.first() is not None:
            raise DuplicateSlot()

        visit = PlannedVisit(
            user_id=user_id,
            court_id=court_id,
            planned_time=planned_time,
            created_at=now,
        )
        db.add(visit)

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise DuplicateSlot()

        await db.refresh(visit)

        logger.info(f"User {user_id} planned a visit to court {court_id} at {planned_time}")
        return visit

    async def delete(self, db: AsyncSession, user_id: int, visit_id: int) -> None:
        """
        Cancel a planned visit. Visits already in the past can still be cancelled.

        Raises:
            NotFound: If the visit does not exist
            Forbidden: If the visit belongs to another user
        """
        visit = await db.get(PlannedVisit, visit_id)
        if visit is None:
            raise NotFound("Visit not found")

        if visit.user_id != user_id:
            raise Forbidden("Not authorized to delete this visit")

        await db.delete(visit)
        await db.commit()

        logger.info(f"User {user_id} cancelled planned visit {visit_id}")

    async def list_for_court(
        self,
        db: AsyncSession,
        court_id: int,
        viewer_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[PlannedVisitWithUser]:
        """
        List upcoming visits at a court as seen by a viewer.

        Args:
            db: Database session
            court_id: Court ID
            viewer_id: Requesting user, or None for guests (no filtering)
            now: Current time (defaults to UTC now)

        Returns:
            Visits at or after now, earliest first, with owner display fields
        """
        now = now or utcnow()

        result = await db.execute(
            select(PlannedVisit, User)
            .join(User, User.id == PlannedVisit.user_id)
            .where(PlannedVisit.court_id == court_id, PlannedVisit.planned_time >= now)
            .order_by(PlannedVisit.planned_time, PlannedVisit.id)
        )
        rows = result.all()

        visible = await filter_visible(db, rows, lambda row: row[0].user_id, viewer_id)

        return [
            PlannedVisitWithUser(
                **PlannedVisitInDB.model_validate(visit).model_dump(),
                user=UserSummary.model_validate(user),
            )
            for visit, user in visible
        ]

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: int,
        court_id: int,
        now: Optional[datetime] = None,
    ) -> List[PlannedVisit]:
        """The user's own upcoming visits at a court, earliest first. Never filtered."""
        now = now or utcnow()

        result = await db.execute(
            select(PlannedVisit)
            .where(
                and_(
                    PlannedVisit.user_id == user_id,
                    PlannedVisit.court_id == court_id,
                    PlannedVisit.planned_time >= now,
                )
            )
            .order_by(PlannedVisit.planned_time, PlannedVisit.id)
        )
        return list(result.scalars().all())

    def group_into_slots(self, visits: List[PlannedVisitWithUser]) -> List[VisitSlot]:
        """Group a time-sorted listing into slots of identical ``planned_time``."""
        return [
            VisitSlot(planned_time=planned_time, visits=list(slot_visits))
            for planned_time, slot_visits in groupby(visits, key=lambda v: v.planned_time)
        ]


# Singleton instance
planned_visit_service = PlannedVisitService()

"""Check-in service for court presence and its expiry."""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import utcnow
from app.core.exceptions import AlreadyCheckedIn, NotCheckedIn, NotFound
from app.models.check_in import CheckIn
from app.models.court import Court
from app.models.user import User
from app.schemas.check_in import CheckInInDB, CheckInWithUser, CleanupResult
from app.schemas.user import UserSummary
from app.services.visibility import filter_visible

logger = logging.getLogger(__name__)


class CheckInService:
    """Service for managing check-ins."""

    def __init__(self, ttl: Optional[timedelta] = None):
        self.ttl = ttl or timedelta(minutes=settings.CHECK_IN_TTL_MINUTES)

    async def check_in(
        self,
        db: AsyncSession,
        user_id: int,
        court_id: int,
        now: Optional[datetime] = None,
    ) -> CheckIn:
        """
        Check a user in at a court.

        An expired row the janitor has not swept yet does not count as a
        current check-in and is replaced.

        Args:
            db: Database session
            user_id: User checking in
            court_id: Court ID
            now: Current time (defaults to UTC now)

        Returns:
            Created check-in

        Raises:
            NotFound: If the court does not exist
            AlreadyCheckedIn: If the user already has an active check-in
        """
        now = now or utcnow()

        if await db.get(Court, court_id) is None:
            raise NotFound("Court not found")

        existing = await self._get_for_user(db, user_id)
        if existing:
            if existing.is_active(now):
                raise AlreadyCheckedIn()

            await db.delete(existing)
            await db.flush()

        check_in = CheckIn(
            user_id=user_id,
            court_id=court_id,
            checked_in_at=now,
            expires_at=now + self.ttl,
        )
        db.add(check_in)

        try:
            await db.commit()
        except IntegrityError:
            # Unique user_id: another request checked this user in first
            await db.rollback()
            raise AlreadyCheckedIn()

        await db.refresh(check_in)

        logger.info(f"User {user_id} checked in at court {court_id} until {check_in.expires_at}")
        return check_in

    async def check_out(self, db: AsyncSession, user_id: int) -> None:
        """
        Remove the user's check-in, expired or not.

        Raises:
            NotCheckedIn: If the user has no check-in row
        """
        existing = await self._get_for_user(db, user_id)
        if not existing:
            raise NotCheckedIn()

        await db.delete(existing)
        await db.commit()

        logger.info(f"User {user_id} checked out of court {existing.court_id}")

    async def get_current(
        self, db: AsyncSession, user_id: int, now: Optional[datetime] = None
    ) -> Optional[CheckIn]:
        """Return the user's check-in if it has not expired. Never deletes."""
        now = now or utcnow()

        existing = await self._get_for_user(db, user_id)
        if existing is None or not existing.is_active(now):
            return None

        return existing

    async def list_active(
        self,
        db: AsyncSession,
        court_id: int,
        viewer_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[CheckInWithUser]:
        """
        List unexpired check-ins at a court as seen by a viewer.

        Args:
            db: Database session
            court_id: Court ID
            viewer_id: Requesting user, or None for guests (no filtering)
            now: Current time (defaults to UTC now)

        Returns:
            Check-ins with owner display fields, oldest first
        """
        now = now or utcnow()

        result = await db.execute(
            select(CheckIn, User)
            .join(User, User.id == CheckIn.user_id)
            .where(CheckIn.court_id == court_id, CheckIn.expires_at > now)
            .order_by(CheckIn.checked_in_at, CheckIn.id)
        )
        rows = result.all()

        visible = await filter_visible(db, rows, lambda row: row[0].user_id, viewer_id)

        return [
            CheckInWithUser(
                **CheckInInDB.model_validate(check_in).model_dump(),
                user=UserSummary.model_validate(user),
            )
            for check_in, user in visible
        ]

    async def sweep_expired(
        self, db: AsyncSession, now: Optional[datetime] = None
    ) -> CleanupResult:
        """
        Delete every check-in whose expiry has passed.

        Each row is deleted in its own transaction. A row that fails is logged
        and left for the next sweep.

        Args:
            db: Database session
            now: Current time (defaults to UTC now)

        Returns:
            Number of rows actually deleted
        """
        now = now or utcnow()

        result = await db.execute(select(CheckIn.id).where(CheckIn.expires_at < now))
        expired_ids = result.scalars().all()

        deleted_count = 0
        for check_in_id in expired_ids:
            try:
                deleted = await db.execute(delete(CheckIn).where(CheckIn.id == check_in_id))
                await db.commit()
                deleted_count += deleted.rowcount
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(
                    f"Failed to delete expired check-in {check_in_id}: {e}",
                    exc_info=True,
                )

        if expired_ids:
            logger.info(f"Deleted {deleted_count} of {len(expired_ids)} expired check-ins")

        return CleanupResult(deleted_count=deleted_count)

    async def _get_for_user(self, db: AsyncSession, user_id: int) -> Optional[CheckIn]:
        result = await db.execute(select(CheckIn).where(CheckIn.user_id == user_id))
        return result.scalars().first()


# Singleton instance
check_in_service = CheckInService()

"""Service for directional user blocks and mutual-block queries."""
import logging
from typing import Iterable, List, Set

from sqlalchemy import select, and_, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import utcnow
from app.core.exceptions import InvalidRequest, NotFound
from app.models.blocked_user import BlockedUser
from app.models.user import User
from app.schemas.block import BlockStatus
from app.schemas.user import UserSummary

logger = logging.getLogger(__name__)


def _either_direction(user_a: int, user_b: int):
    return or_(
        and_(BlockedUser.user_id == user_a, BlockedUser.blocked_user_id == user_b),
        and_(BlockedUser.user_id == user_b, BlockedUser.blocked_user_id == user_a),
    )


class BlockService:
    """Service for managing block relationships."""

    async def block(self, db: AsyncSession, user_id: int, blocked_user_id: int) -> None:
        """
        Record that ``user_id`` blocks ``blocked_user_id``.

        Blocking an already-blocked user is a no-op.

        Args:
            db: Database session
            user_id: Blocker
            blocked_user_id: User being blocked

        Raises:
            InvalidRequest: If a user tries to block themselves
            NotFound: If the blocked user does not exist
        """
        if user_id == blocked_user_id:
            raise InvalidRequest("You cannot block yourself")

        if await db.get(User, blocked_user_id) is None:
            raise NotFound("User not found")

        existing = await self._get_record(db, user_id, blocked_user_id)
        if existing:
            return

        db.add(
            BlockedUser(
                user_id=user_id,
                blocked_user_id=blocked_user_id,
                created_at=utcnow(),
            )
        )

        try:
            await db.commit()
        except IntegrityError:
            # Same pair inserted by a concurrent request
            await db.rollback()
            return

        logger.info(f"User {user_id} blocked user {blocked_user_id}")

    async def unblock(self, db: AsyncSession, user_id: int, blocked_user_id: int) -> None:
        """Remove the block if it exists. Missing blocks are a no-op."""
        existing = await self._get_record(db, user_id, blocked_user_id)
        if not existing:
            return

        await db.delete(existing)
        await db.commit()

        logger.info(f"User {user_id} unblocked user {blocked_user_id}")

    async def is_mutually_blocked(self, db: AsyncSession, user_a: int, user_b: int) -> bool:
        """True if either user has blocked the other."""
        result = await db.execute(
            select(BlockedUser.id).where(_either_direction(user_a, user_b)).limit(1)
        )
        return result.first() is not None

    async def get_status(
        self, db: AsyncSession, user_id: int, target_user_id: int
    ) -> BlockStatus:
        """
        Report each block direction between the caller and a target separately.

        Both directions are read in a single query.

        Args:
            db: Database session
            user_id: Caller
            target_user_id: User whose profile is being viewed

        Returns:
            BlockStatus with ``is_blocked`` (caller blocked target) and
            ``is_blocked_by`` (target blocked caller)
        """
        result = await db.execute(
            select(BlockedUser.user_id).where(_either_direction(user_id, target_user_id))
        )
        blockers = set(result.scalars().all())

        return BlockStatus(
            is_blocked=user_id in blockers,
            is_blocked_by=target_user_id in blockers,
        )

    async def list_blocked(self, db: AsyncSession, user_id: int) -> List[UserSummary]:
        """Users the caller has blocked, most recent first."""
        result = await db.execute(
            select(User)
            .join(BlockedUser, BlockedUser.blocked_user_id == User.id)
            .where(BlockedUser.user_id == user_id)
            .order_by(BlockedUser.created_at.desc())
        )
        return [UserSummary.model_validate(user) for user in result.scalars().all()]

    async def related_user_ids(
        self, db: AsyncSession, viewer_id: int, candidate_ids: Iterable[int]
    ) -> Set[int]:
        """
        Return the candidates that have a block in either direction with the viewer.

        Looks up every candidate in one round trip instead of two queries per
        candidate.
        """
        candidate_ids = set(candidate_ids)
        if not candidate_ids:
            return set()

        result = await db.execute(
            select(BlockedUser.user_id, BlockedUser.blocked_user_id).where(
                or_(
                    and_(
                        BlockedUser.user_id == viewer_id,
                        BlockedUser.blocked_user_id.in_(candidate_ids),
                    ),
                    and_(
                        BlockedUser.blocked_user_id == viewer_id,
                        BlockedUser.user_id.in_(candidate_ids),
                    ),
                )
            )
        )

        related = set()
        for blocker_id, blocked_id in result.all():
            related.add(blocked_id if blocker_id == viewer_id else blocker_id)
        return related

    async def _get_record(
        self, db: AsyncSession, user_id: int, blocked_user_id: int
    ):
        result = await db.execute(
            select(BlockedUser).where(
                and_(
                    BlockedUser.user_id == user_id,
                    BlockedUser.blocked_user_id == blocked_user_id,
                )
            )
        )
        return result.scalars().first()


# Singleton instance
block_service = BlockService()

"""Block-aware visibility filtering for court listings."""
from typing import Callable, List, Optional, Sequence, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.services.block_service import block_service

T = TypeVar("T")


async def filter_visible(
    db: AsyncSession,
    records: Sequence[T],
    owner_id: Callable[[T], int],
    viewer_id: Optional[int],
) -> List[T]:
    """
    Drop records owned by users who have a block in either direction with the viewer.

    Blocks are a social preference, not access control: guests
    (``viewer_id`` is None) see every record, and viewers always see their own.

    Args:
        db: Database session
        records: Records to filter, order is preserved
        owner_id: Extracts the owning user's id from a record
        viewer_id: User requesting the listing, or None for guests

    Returns:
        Visible records
    """
    if viewer_id is None:
        return list(records)

    candidates = {owner_id(record) for record in records}
    candidates.discard(viewer_id)

    hidden = await block_service.related_user_ids(db, viewer_id, candidates)
    if not hidden:
        return list(records)

    return [record for record in records if owner_id(record) not in hidden]

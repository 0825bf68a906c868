"""API schemas."""
from app.schemas.user import (
    UserCreate,
    UserSummary,
    UserInDB,
    SelectedCourtUpdate,
)
from app.schemas.court import (
    CourtCreate,
    CourtNotesUpdate,
    CourtInDB,
)
from app.schemas.check_in import (
    CheckInInDB,
    CheckInWithUser,
    CleanupResult,
)
from app.schemas.planned_visit import (
    PlannedVisitCreate,
    PlannedVisitInDB,
    PlannedVisitWithUser,
    VisitSlot,
)
from app.schemas.block import (
    BlockCreate,
    BlockStatus,
)

__all__ = [
    "UserCreate",
    "UserSummary",
    "UserInDB",
    "SelectedCourtUpdate",
    "CourtCreate",
    "CourtNotesUpdate",
    "CourtInDB",
    "CheckInInDB",
    "CheckInWithUser",
    "CleanupResult",
    "PlannedVisitCreate",
    "PlannedVisitInDB",
    "PlannedVisitWithUser",
    "VisitSlot",
    "BlockCreate",
    "BlockStatus",
]

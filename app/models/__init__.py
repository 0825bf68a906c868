"""Database models."""
from app.models.user import User
from app.models.court import Court
from app.models.check_in import CheckIn
from app.models.planned_visit import PlannedVisit
from app.models.blocked_user import BlockedUser

__all__ = ["User", "Court", "CheckIn", "PlannedVisit", "BlockedUser"]

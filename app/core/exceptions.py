"""Domain exceptions raised by the service layer."""


class WePickleError(Exception):
    """Base exception for all business-rule violations."""

    status_code = 400
    default_detail = "Request could not be processed"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotAuthenticated(WePickleError):
    """Caller identity is missing or unknown."""

    status_code = 401
    default_detail = "Not authenticated"


class AlreadyCheckedIn(WePickleError):
    """User already holds an active check-in."""

    status_code = 409
    default_detail = "Already checked in"


class NotCheckedIn(WePickleError):
    """User has no check-in to remove."""

    status_code = 409
    default_detail = "Not checked in"


class PastTime(WePickleError):
    """Planned visit requested for a time before now."""

    status_code = 400
    default_detail = "Cannot plan for past times"


class DuplicateSlot(WePickleError):
    """User already has a planned visit for this exact court and time."""

    status_code = 409
    default_detail = "You already have a plan for this time"


class NotFound(WePickleError):
    status_code = 404
    default_detail = "Not found"


class Forbidden(WePickleError):
    status_code = 403
    default_detail = "Not authorized"


class InvalidRequest(WePickleError):
    status_code = 400
    default_detail = "Invalid request"

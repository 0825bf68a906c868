"""Background scheduler for expired check-in cleanup."""
import logging
from typing import Optional
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.core.config import settings
from app.core.database import AsyncSessionLocal
from app.schemas.check_in import CleanupResult
from app.services.check_in_service import check_in_service

logger = logging.getLogger(__name__)


class ExpiryJanitor:
    """Periodically deletes check-ins whose expiry has passed."""

    def __init__(self, interval_minutes: Optional[int] = None, session_factory=None):
        """Initialize the scheduler."""
        self.scheduler = AsyncIOScheduler()
        self.interval_minutes = interval_minutes or settings.CHECK_IN_CLEANUP_INTERVAL_MINUTES
        self.session_factory = session_factory or AsyncSessionLocal
        self.running = False
        self.last_result: Optional[CleanupResult] = None

    async def start(self):
        """Start the scheduler."""
        if self.running:
            logger.warning("Expiry janitor is already running")
            return

        logger.info(f"Starting expiry janitor (every {self.interval_minutes} minutes)")

        self.scheduler.add_job(
            self._run_job,
            IntervalTrigger(minutes=self.interval_minutes),
            id="cleanup_expired_check_ins",
            name="Cleanup expired check-ins",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

        self.scheduler.start()
        self.running = True
        logger.info("Expiry janitor started")

    async def stop(self):
        """Stop the scheduler."""
        if not self.running:
            return

        logger.info("Stopping expiry janitor")
        self.scheduler.shutdown(wait=False)
        self.running = False
        logger.info("Expiry janitor stopped")

    async def run_once(self) -> CleanupResult:
        """
        Sweep expired check-ins once.

        This is the scheduled entry point; it takes no arguments and reports how
        many rows were deleted.
        """
        async with self.session_factory() as db:
            result = await check_in_service.sweep_expired(db)

        self.last_result = result
        return result

    async def _run_job(self):
        """Scheduled wrapper. Errors are logged and the next interval retries."""
        logger.debug("Running expired check-in cleanup")

        try:
            await self.run_once()
        except Exception as e:
            logger.error(f"Error in expired check-in cleanup: {e}", exc_info=True)


# Singleton instance
expiry_janitor = ExpiryJanitor()

from datetime import timedelta

from app.core.database import utcnow
from app.services.check_in_service import check_in_service
from app.services.scheduler import ExpiryJanitor


async def test_run_once_sweeps_expired_check_ins(db, session_factory, alice, bob, court):
    now = utcnow()
    await check_in_service.check_in(db, alice.id, court.id, now=now - timedelta(hours=3))
    await check_in_service.check_in(db, bob.id, court.id, now=now)

    janitor = ExpiryJanitor(session_factory=session_factory)
    result = await janitor.run_once()

    assert result.deleted_count == 1
    assert janitor.last_result == result
    assert await check_in_service.get_current(db, bob.id) is not None


async def test_start_schedules_cleanup_job(session_factory):
    janitor = ExpiryJanitor(interval_minutes=5, session_factory=session_factory)

    await janitor.start()
    try:
        job = janitor.scheduler.get_job("cleanup_expired_check_ins")
        assert janitor.running
        assert job is not None
        assert job.trigger.interval == timedelta(minutes=5)
    finally:
        await janitor.stop()

    assert not janitor.running


async def test_scheduled_job_logs_errors_instead_of_raising(session_factory, monkeypatch, caplog):
    janitor = ExpiryJanitor(session_factory=session_factory)

    async def broken_sweep(db, now=None):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(check_in_service, "sweep_expired", broken_sweep)

    await janitor._run_job()

    assert "store unavailable" in caplog.text

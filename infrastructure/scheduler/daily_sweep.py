"""
Daily retention sweep scheduler.

Runs a sweep callable once a day at a fixed UTC time inside the application's
event loop. A failed tick is logged and the loop waits for the next one.
"""
import asyncio
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from domain.entities import SweepResult
from infrastructure.logging.structlog_logs import logger


def seconds_until_next_run(now: datetime, hour: int = 0, minute: int = 0) -> float:
    """
    Seconds from now until the next HH:MM (UTC). A run due exactly now
    is scheduled for the following day.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    next_run = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if next_run <= now:
        next_run += timedelta(days=1)
    return (next_run - now).total_seconds()


class DailySweepScheduler:
    """
    Background task calling run_sweep every day at hour:minute UTC.

    Args:
        run_sweep: Coroutine function performing one sweep
        hour: Hour of day (UTC) to run at
        minute: Minute of the hour to run at
        clock: Source of the current time (overridable in tests)
    """

    def __init__(
        self,
        run_sweep: Callable[[], Awaitable[SweepResult]],
        hour: int = 0,
        minute: int = 0,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.run_sweep = run_sweep
        self.hour = hour
        self.minute = minute
        self.clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def tick(self) -> Optional[SweepResult]:
        """Run one sweep. Failures are logged, never raised."""
        log = logger.bind(step="scheduled_sweep")
        try:
            result = await self.run_sweep()
        except Exception as e:
            log.error("scheduled_sweep_failed", error=str(e), exc_info=True)
            return None
        log.info("scheduled_sweep_completed", deleted_count=result.deleted_count)
        return result

    async def _loop(self) -> None:
        while True:
            delay = seconds_until_next_run(self.clock(), self.hour, self.minute)
            logger.info("scheduled_sweep_waiting", step="scheduled_sweep", seconds=round(delay, 1))
            await asyncio.sleep(delay)
            await self.tick()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

"""Background task that rolls the diary over at local midnight."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from calorie_tracker.services.clock import Clock
from calorie_tracker.services.diary import DiaryService

_logger = logging.getLogger(__name__)


def seconds_until_midnight(now: datetime) -> float:
    """Return seconds from an aware datetime to its next local midnight."""
    next_day = now.date() + timedelta(days=1)
    midnight = datetime(next_day.year, next_day.month, next_day.day, tzinfo=now.tzinfo)
    return max(midnight.timestamp() - now.timestamp(), 0.0)


@dataclass
class MidnightRolloverScheduler:
    """Sleeps until each local midnight and reconciles the diary."""

    diary_service: DiaryService
    clock: Clock
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    _task: "asyncio.Task[None] | None" = field(default=None, init=False, repr=False)

    async def run_once(self) -> None:
        """Wait for the next midnight, then run the rollover."""
        delay = seconds_until_midnight(self.clock.now())
        await self.sleep(delay)
        try:
            archived = self.diary_service.reconcile()
        except Exception:
            _logger.exception("Midnight rollover failed")
            return
        if archived is None:
            _logger.info("Midnight rollover found nothing to archive")

    async def run_forever(self) -> None:
        while True:
            await self.run_once()

    def start(self) -> None:
        """Arm the scheduler on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run_forever())

    async def stop(self) -> None:
        """Cancel the scheduler task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

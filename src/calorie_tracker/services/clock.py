"""Time source for day-boundary decisions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Provides the current timezone-aware time."""

    def now(self) -> datetime:
        """Return the current time."""


@dataclass
class ZoneClock(Clock):
    """Wall clock in a fixed IANA timezone."""

    timezone_name: str = "UTC"

    def now(self) -> datetime:
        """Return the current time in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name))


def today(clock: Clock) -> str:
    """Return the clock's current calendar date as YYYY-MM-DD."""
    return clock.now().date().isoformat()

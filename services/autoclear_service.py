"""
Daily queue autoclear.

Sleeps until the configured local hour, empties the queue, and repeats. The
wait is recomputed from the wall clock on every cycle.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable

from domain.models.draft import MatchPhase
from services.match_state_manager import MatchStateManager

logger = logging.getLogger("scrim_bot.services.autoclear_service")


def local_now() -> datetime:
    """Current wall-clock time as an aware datetime in the system timezone."""
    return datetime.now().astimezone()


def next_autoclear_at(now: datetime, hour: int) -> datetime:
    """
    Next occurrence of `hour`:00:00 strictly after `now`.

    For an aware `now` the target is resolved against the system timezone,
    so the result carries the UTC offset in force on that day.

    Examples:
        >>> next_autoclear_at(datetime(2024, 5, 1, 3, 30), 5)
        datetime.datetime(2024, 5, 1, 5, 0)
        >>> next_autoclear_at(datetime(2024, 5, 1, 5, 0), 5)
        datetime.datetime(2024, 5, 2, 5, 0)
    """
    wall = now.replace(tzinfo=None)
    target = wall.replace(hour=hour, minute=0, second=0, microsecond=0)
    if target <= wall:
        target += timedelta(days=1)
    if now.tzinfo is not None:
        target = target.astimezone()
    return target


class AutoclearService:
    """Empties the queue once a day at a fixed local hour."""

    def __init__(
        self,
        state: MatchStateManager,
        hour: int,
        now: Callable[[], datetime] = local_now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if not 0 <= hour <= 23:
            raise ValueError(f"Autoclear hour must be between 0 and 23, got {hour}")
        self.state = state
        self.hour = hour
        self._now = now
        self._sleep = sleep

    def seconds_until_next(self) -> float:
        now = self._now()
        return (next_autoclear_at(now, self.hour) - now).total_seconds()

    async def clear_now(self) -> bool:
        """
        Empty the queue and notes.

        Skipped while a match is being set up, so a running draft never loses
        its roster. The next day's run tries again.

        Returns:
            True if the queue was cleared
        """
        async with self.state.lock:
            if self.state.phase is not MatchPhase.QUEUE:
                logger.warning(
                    f"Autoclear skipped, match setup in progress (phase {self.state.phase.value})"
                )
                return False
            size = self.state.queue.size()
            self.state.queue.clear()

        logger.info(f"Autoclear emptied the queue ({size} players removed)")
        return True

    async def run_once(self) -> bool:
        """Wait for the next autoclear time, then clear."""
        delay = self.seconds_until_next()
        logger.info(f"Next autoclear in {delay:.0f}s")
        await self._sleep(delay)
        return await self.clear_now()

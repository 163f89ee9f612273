"""Fixed-window throttle for outgoing API calls.

Admits at most `limit` calls per window of `period_ms` milliseconds. The
window opens at the first admission after the previous one expired. Callers
arriving at a full window either fail fast with RateLimitExceeded or wait
in a FIFO queue; a single drain task wakes them at each window boundary.

Admission is point-in-time: slots are never released, they simply expire
with the window.
"""

import asyncio
import time
from collections import deque
from dataclasses import dataclass

from highsystems.errors import RateLimitExceeded
from highsystems.logging.debug import get_logger

logger = get_logger("request")


@dataclass
class RateWindow:
    start: float | None = None
    admitted: int = 0


class Throttle:

    def __init__(self, limit: int, period_ms: float, error_on_limit: bool = False):
        self.limit = limit
        self.period = period_ms / 1000.0
        self.error_on_limit = error_on_limit
        self._window = RateWindow()
        self._waiters: deque[asyncio.Future] = deque()
        self._drainer: asyncio.Task | None = None

    @property
    def admitted(self) -> int:
        """Admissions in the current window (0 once it has expired)."""
        self._roll(time.monotonic())
        return self._window.admitted

    @property
    def waiting(self) -> int:
        return sum(1 for fut in self._waiters if not fut.done())

    def _roll(self, now: float) -> None:
        start = self._window.start
        if start is None or now - start >= self.period:
            self._window = RateWindow(start=None, admitted=0)

    def _admit(self, now: float) -> None:
        if self._window.start is None:
            self._window.start = now
        self._window.admitted += 1

    def _reset_in(self, now: float) -> float:
        if self._window.start is None:
            return 0.0
        return max(0.0, self._window.start + self.period - now)

    async def acquire(self) -> None:
        """Wait until the current call may be sent."""
        now = time.monotonic()
        self._roll(now)

        if self._window.admitted < self.limit and not self.waiting:
            self._admit(now)
            return

        if self.error_on_limit:
            raise RateLimitExceeded(retry_after=round(self._reset_in(now), 3), limit=self.limit)

        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        self._waiters.append(waiter)
        logger.debug(
            "Connection limit reached, queueing call",
            extra={"debug_data": {"waiting": len(self._waiters), "limit": self.limit}},
        )

        if self._drainer is None or self._drainer.done():
            self._drainer = loop.create_task(self._drain())

        await waiter

    async def _drain(self) -> None:
        while self._waiters:
            now = time.monotonic()
            self._roll(now)

            while self._waiters and self._window.admitted < self.limit:
                waiter = self._waiters.popleft()
                if waiter.done():
                    # caller gave up while queued
                    continue
                self._admit(now)
                waiter.set_result(None)

            if not self._waiters:
                break

            await asyncio.sleep(self._reset_in(time.monotonic()))

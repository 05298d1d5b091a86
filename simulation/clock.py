"""
Purpose: Time source for the simulation.
What it does:
Every simulated delay (food preparation, driving, status ticks) goes through a
Clock instead of calling asyncio.sleep directly, so the same code runs on
real (optionally scaled) time in demos and on a virtual timeline in tests.

- ScaledClock: real asyncio sleeps, multiplied by `time_scale`.
- VirtualClock: a heap of pending timers that jumps straight to the next
  deadline once every task is waiting. No wall-clock time passes.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Protocol, Tuple


class Clock(Protocol):
    def now(self) -> datetime:
        """Wall-clock timestamp used to stamp records."""
        ...

    def monotonic(self) -> float:
        """Elapsed simulated seconds since the clock was created."""
        ...

    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task for `seconds` of simulated time."""
        ...


class ScaledClock:
    """
    Real-time clock with a speed knob.

    time_scale=1.0 waits the full simulated delay, 0.01 waits a hundredth of
    it, 0 only yields to the event loop. `monotonic()` converts wall time back
    into simulated seconds so elapsed measures stay comparable across scales.
    """

    def __init__(self, time_scale: float = 1.0):
        if time_scale < 0:
            raise ValueError("time_scale must be >= 0")
        self.time_scale = time_scale
        self._origin = time.monotonic()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        elapsed = time.monotonic() - self._origin
        if self.time_scale == 0:
            return elapsed
        return elapsed / self.time_scale

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(max(0.0, seconds) * self.time_scale)


class VirtualClock:
    """
    Deterministic clock for tests and offline runs.

    Sleepers park a future on a min-heap keyed by deadline. A single driver
    task yields to the event loop until nothing else is runnable, i.e. every
    task is parked on a timer or on something outside the clock. Only then
    does it pop the earliest deadline, move virtual time forward to it and
    wake that sleeper.

    "Nothing else is runnable" is read from the loop's ready queue, which the
    stock asyncio loops expose as `_ready`. On loops without it (e.g. uvloop)
    the driver falls back to yielding `settle_rounds` times, so a woken task
    must reach its next clock.sleep() within that many loop turns.
    """

    DEFAULT_START = datetime(2025, 8, 5, 10, 30, tzinfo=timezone.utc)

    def __init__(self, start: Optional[datetime] = None, settle_rounds: int = 50):
        self._start = start or self.DEFAULT_START
        self._elapsed = 0.0
        self._settle_rounds = settle_rounds
        self._timers: List[Tuple[float, int, asyncio.Future]] = []
        self._sequence = itertools.count()
        self._driver: Optional[asyncio.Task] = None

    def now(self) -> datetime:
        return self._start + timedelta(seconds=self._elapsed)

    def monotonic(self) -> float:
        return self._elapsed

    def pending_timers(self) -> int:
        return len(self._timers)

    async def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            await asyncio.sleep(0)
            return

        loop = asyncio.get_running_loop()
        wake_up = loop.create_future()
        # sequence number keeps FIFO order for equal deadlines
        heapq.heappush(self._timers, (self._elapsed + seconds, next(self._sequence), wake_up))

        if self._driver is None or self._driver.done():
            self._driver = loop.create_task(self._advance())

        await wake_up

    async def _wait_until_idle(self) -> None:
        ready = getattr(asyncio.get_running_loop(), "_ready", None)

        if ready is None:
            for _ in range(self._settle_rounds):
                await asyncio.sleep(0)
            return

        # the driver is running, so it is not in the queue itself
        await asyncio.sleep(0)
        while ready:
            await asyncio.sleep(0)

    async def _advance(self) -> None:
        while True:
            await self._wait_until_idle()

            if not self._timers:
                return

            deadline, _, wake_up = heapq.heappop(self._timers)
            if wake_up.done():
                # sleeper was cancelled while parked
                continue

            self._elapsed = max(self._elapsed, deadline)
            wake_up.set_result(None)

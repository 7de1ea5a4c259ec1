# ABOUTME: In-memory virtual-clock implementation of AbstractTimerScheduler
# ABOUTME: Deterministic timer firing for tests and simulations, advanced explicitly by the caller

import heapq
import itertools
import math
import time
from dataclasses import dataclass, field

from loguru import logger

from authtoken.interfaces.scheduler import AbstractTimerScheduler, TimerCallback


@dataclass(order=True)
class VirtualTimerHandle:
    """Internal scheduled-callback entry, ordered by due time then insertion sequence."""

    due_ms: float
    sequence: int
    callback: TimerCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        """Prevent the callback from running. No-op once fired."""
        self.cancelled = True


class VirtualTimerScheduler(AbstractTimerScheduler):
    """
    In-memory implementation of AbstractTimerScheduler using a virtual clock.

    Time only moves when the caller advances it, which makes timer behavior
    fully deterministic. Callbacks run in due-time order; callbacks due at the
    same instant run in scheduling order. A callback scheduled with zero delay
    does not run inside `call_later`; it runs on the next `run_pending()` or
    `advance()` call, mirroring an event loop's "next turn".

    Features:
    - Virtual wall clock starting at a given epoch-millisecond instant
    - Stable ordering for equal due times
    - Callbacks may schedule further callbacks; those due within an
      `advance()` window also run in the same call
    - Cancellation through the returned handle

    Note:
        This scheduler is not thread-safe. It is designed for single-threaded
        tests and simulations.
    """

    def __init__(self, start_ms: float | None = None):
        """
        Initialize the virtual scheduler.

        Args:
            start_ms: Initial clock value in epoch milliseconds. Defaults to the
                      current wall-clock time.
        """
        self._now_ms = float(time.time() * 1000 if start_ms is None else start_ms)
        self._queue: list[VirtualTimerHandle] = []
        self._sequence = itertools.count()
        self._fired_count = 0

    def now_ms(self) -> float:
        return self._now_ms

    def call_later(self, delay_ms: float, callback: TimerCallback) -> VirtualTimerHandle:
        if not math.isfinite(delay_ms) or delay_ms < 0:
            raise ValueError(f"delay_ms must be a finite, non-negative number, got {delay_ms!r}")

        handle = VirtualTimerHandle(
            due_ms=self._now_ms + delay_ms,
            sequence=next(self._sequence),
            callback=callback,
        )
        heapq.heappush(self._queue, handle)
        return handle

    def run_pending(self) -> int:
        """
        Run every callback due at or before the current virtual time.

        Returns:
            The number of callbacks that ran.
        """
        return self._run_until(self._now_ms)

    def advance(self, delta_ms: float) -> int:
        """
        Move the virtual clock forward, running callbacks as their due time passes.

        The clock is stepped to each callback's due time before it runs, so a
        callback observes `now_ms()` equal to its own due time.

        Args:
            delta_ms: Non-negative number of milliseconds to advance.

        Returns:
            The number of callbacks that ran.

        Raises:
            ValueError: If `delta_ms` is negative or not finite.
        """
        if not math.isfinite(delta_ms) or delta_ms < 0:
            raise ValueError(f"delta_ms must be a finite, non-negative number, got {delta_ms!r}")
        return self._run_until(self._now_ms + delta_ms)

    def advance_to(self, target_ms: float) -> int:
        """
        Advance the virtual clock to an absolute epoch-millisecond instant.

        Returns:
            The number of callbacks that ran.
        """
        return self.advance(max(0.0, target_ms - self._now_ms))

    def _run_until(self, target_ms: float) -> int:
        ran = 0
        while self._queue and self._queue[0].due_ms <= target_ms:
            handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now_ms = max(self._now_ms, handle.due_ms)
            handle.fired = True
            self._fired_count += 1
            ran += 1
            handle.callback()
        self._now_ms = max(self._now_ms, target_ms)
        if ran:
            logger.trace("Virtual scheduler ran callbacks", count=ran, now_ms=self._now_ms)
        return ran

    def pending_count(self) -> int:
        """
        Get the number of scheduled callbacks that have neither run nor been cancelled.

        Returns:
            The pending callback count.
        """
        return sum(1 for handle in self._queue if not handle.cancelled)

    def next_due_ms(self) -> float | None:
        """
        Get the due time of the earliest pending callback.

        Returns:
            The epoch-millisecond due time, or None if nothing is pending.
        """
        pending = [handle.due_ms for handle in self._queue if not handle.cancelled]
        return min(pending) if pending else None

    def get_statistics(self) -> dict[str, float | int]:
        """Get scheduler statistics."""
        return {
            "now_ms": self._now_ms,
            "pending_count": self.pending_count(),
            "fired_count": self._fired_count,
        }

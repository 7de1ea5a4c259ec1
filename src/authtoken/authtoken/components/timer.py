# ABOUTME: Owned one-shot timer with explicit cancellation
# ABOUTME: Clamps delays to non-negative finite values and guarantees at-most-once firing

from __future__ import annotations

import math

from loguru import logger

from authtoken.interfaces.scheduler import AbstractTimerScheduler, TimerCallback, TimerHandle


class OneShotTimer:
    """
    A callback scheduled to run at most once after a delay.

    The timer schedules itself on construction. Negative delays clamp to zero
    (the callback still runs on the next scheduler turn); a NaN or infinite
    delay is rejected so it can never reach the scheduler.

    Attributes:
        name: Label used in log output.
        delay_ms: The clamped delay the timer was scheduled with.
    """

    def __init__(self, scheduler: AbstractTimerScheduler, delay_ms: float, callback: TimerCallback, name: str = "timer"):
        """
        Initialize and schedule the timer.

        Args:
            scheduler: The scheduler to run the callback on.
            delay_ms: Requested delay in milliseconds. Values below zero clamp to zero.
            callback: The callable to invoke when the timer fires.
            name: Label used in log output.

        Raises:
            ValueError: If `delay_ms` is NaN or infinite.
        """
        if not math.isfinite(delay_ms):
            raise ValueError(f"Timer '{name}' delay must be finite, got {delay_ms!r}")

        self.name = name
        self.delay_ms = max(0.0, float(delay_ms))
        self._callback = callback
        self._fired = False
        self._cancelled = False
        self._handle: TimerHandle | None = scheduler.call_later(self.delay_ms, self._fire)

    @property
    def fired(self) -> bool:
        """Whether the callback has run."""
        return self._fired

    @property
    def cancelled(self) -> bool:
        """Whether the timer was cancelled before firing."""
        return self._cancelled

    @property
    def pending(self) -> bool:
        """Whether the timer will still fire."""
        return not self._fired and not self._cancelled

    def _fire(self) -> None:
        if not self.pending:
            return
        self._fired = True
        self._handle = None
        callback, self._callback = self._callback, None
        callback()

    def cancel(self) -> bool:
        """
        Cancel the timer if it has not fired yet.

        Drops the reference to the callback so the owner can be garbage collected.

        Returns:
            True if a pending timer was cancelled, False if it had already fired
            or been cancelled.
        """
        if not self.pending:
            return False
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None
        logger.debug("Timer cancelled", timer=self.name)
        return True

    def __repr__(self) -> str:
        state = "fired" if self._fired else "cancelled" if self._cancelled else "pending"
        return f"OneShotTimer(name={self.name!r}, delay_ms={self.delay_ms}, state={state})"

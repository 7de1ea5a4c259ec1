# ABOUTME: asyncio-backed timer scheduler driving real token timers
# ABOUTME: Wraps loop.call_later and reads wall-clock time for delay computation

import asyncio
import math
import time

from loguru import logger

from authtoken.exceptions.token import TokenSchedulingError
from authtoken.interfaces.scheduler import AbstractTimerScheduler, TimerCallback, TimerHandle


class AsyncioTimerScheduler(AbstractTimerScheduler):
    """
    Timer scheduler backed by an asyncio event loop.

    Delays are measured against wall-clock time (`time.time()`), and callbacks
    are scheduled with `loop.call_later`, so a zero delay still runs on the
    next loop iteration rather than synchronously.

    The scheduler binds to the loop that is running when it is created unless
    a loop is passed explicitly.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """
        Initialize the scheduler.

        Args:
            loop: The event loop to schedule on. Defaults to the running loop.

        Raises:
            TokenSchedulingError: If no loop is given and none is running.
        """
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise TokenSchedulingError(
                    message="No running event loop; construct tokens inside a coroutine or pass a scheduler",
                    code="NO_RUNNING_LOOP",
                ) from e
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The event loop this scheduler runs callbacks on."""
        return self._loop

    def now_ms(self) -> float:
        return time.time() * 1000

    def call_later(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        if not math.isfinite(delay_ms) or delay_ms < 0:
            raise ValueError(f"delay_ms must be a finite, non-negative number, got {delay_ms!r}")

        if self._loop.is_closed():
            raise TokenSchedulingError(message="Event loop is closed", code="LOOP_CLOSED")

        handle = self._loop.call_later(delay_ms / 1000, callback)
        logger.trace("Scheduled asyncio timer", delay_ms=delay_ms)
        return handle

from abc import ABC, abstractmethod
from typing import Callable, Protocol

TimerCallback = Callable[[], None]  # Type alias for a deferred, argument-less callback.


class TimerHandle(Protocol):
    """
    Protocol for a handle to a scheduled callback.

    `asyncio.TimerHandle` satisfies this protocol, as does the virtual
    scheduler's own handle type.
    """

    def cancel(self) -> None:
        """
        Cancels the scheduled callback.

        Cancelling a callback that already ran, or was already cancelled, is a no-op.
        """
        ...


class AbstractTimerScheduler(ABC):
    """
    Abstract interface for the single-threaded timeline tokens schedule on.

    A scheduler exposes a wall clock and a way to run a callback once after a
    delay. Callbacks always run on a later scheduler turn, never synchronously
    inside `call_later`, even when the delay is zero. This is what lets a
    caller attach listeners to a freshly constructed token before its first
    event can fire.

    All callbacks for one scheduler run on a single logical timeline; no two
    callbacks run concurrently.
    """

    @abstractmethod
    def now_ms(self) -> float:
        """
        Returns the scheduler's wall-clock time.

        Token delays are computed against this clock, so an implementation
        backed by real time must use wall-clock (epoch) time here rather than
        a monotonic clock.

        Returns:
            float: Current time as epoch milliseconds.
        """
        pass

    @abstractmethod
    def call_later(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        """
        Schedules `callback` to run once after `delay_ms` milliseconds.

        Args:
            delay_ms (float): Non-negative, finite delay in milliseconds.
            callback (TimerCallback): The callable to invoke. Its return value is ignored.

        Returns:
            TimerHandle: A handle whose `cancel()` prevents the callback from running.

        Raises:
            ValueError: If `delay_ms` is negative or not finite.
        """
        pass

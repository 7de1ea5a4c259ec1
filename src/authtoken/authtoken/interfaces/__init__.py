# ABOUTME: Interfaces package exports
# ABOUTME: Exports the timer scheduler abstraction tokens depend on

from .scheduler import AbstractTimerScheduler, TimerCallback, TimerHandle

__all__ = [
    "AbstractTimerScheduler",
    "TimerCallback",
    "TimerHandle",
]

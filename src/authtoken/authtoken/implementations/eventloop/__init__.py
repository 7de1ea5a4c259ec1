from .scheduler import AsyncioTimerScheduler

__all__ = ["AsyncioTimerScheduler"]

from .scheduler import VirtualTimerHandle, VirtualTimerScheduler

__all__ = ["VirtualTimerHandle", "VirtualTimerScheduler"]

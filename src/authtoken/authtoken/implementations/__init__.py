# ABOUTME: Timer scheduler implementations package
# ABOUTME: Exports the asyncio-backed and virtual-clock schedulers

from authtoken.implementations.eventloop.scheduler import AsyncioTimerScheduler
from authtoken.implementations.memory.scheduler import VirtualTimerHandle, VirtualTimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
    "VirtualTimerHandle",
    "VirtualTimerScheduler",
]

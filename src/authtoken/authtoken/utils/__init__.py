"""Utility helpers for time operations."""

from .time import EPOCH, from_epoch_ms, now_ms, to_epoch_ms, to_utc, truncate_to_ms, utc_now

__all__ = ["EPOCH", "from_epoch_ms", "now_ms", "to_epoch_ms", "to_utc", "truncate_to_ms", "utc_now"]

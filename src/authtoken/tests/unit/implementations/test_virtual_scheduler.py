# ABOUTME: Unit tests for the virtual-clock timer scheduler
# ABOUTME: Tests cover ordering, next-turn semantics for zero delays, advancing and cancellation

import pytest

from authtoken.implementations.memory.scheduler import VirtualTimerScheduler


class TestVirtualTimerScheduler:
    """Test cases for VirtualTimerScheduler."""

    @pytest.mark.unit
    def test_start_time(self):
        scheduler = VirtualTimerScheduler(start_ms=1_000)

        assert scheduler.now_ms() == 1_000

    @pytest.mark.unit
    def test_default_start_time_is_wall_clock(self, monkeypatch):
        monkeypatch.setattr("authtoken.implementations.memory.scheduler.time.time", lambda: 1234.5)

        assert VirtualTimerScheduler().now_ms() == 1_234_500

    @pytest.mark.unit
    def test_zero_delay_is_not_synchronous(self, scheduler):
        calls = []

        scheduler.call_later(0, lambda: calls.append("ran"))

        assert calls == []
        assert scheduler.run_pending() == 1
        assert calls == ["ran"]

    @pytest.mark.unit
    def test_runs_in_due_order_then_schedule_order(self, scheduler):
        calls = []
        scheduler.call_later(20, lambda: calls.append("late"))
        scheduler.call_later(10, lambda: calls.append("early-1"))
        scheduler.call_later(10, lambda: calls.append("early-2"))

        assert scheduler.advance(20) == 3
        assert calls == ["early-1", "early-2", "late"]

    @pytest.mark.unit
    def test_callback_sees_its_due_time(self, scheduler):
        start = scheduler.now_ms()
        seen = []
        scheduler.call_later(250, lambda: seen.append(scheduler.now_ms()))

        scheduler.advance(1000)

        assert seen == [start + 250]
        assert scheduler.now_ms() == start + 1000

    @pytest.mark.unit
    def test_nested_schedule_within_window_runs(self, scheduler):
        calls = []

        def outer():
            calls.append("outer")
            scheduler.call_later(10, lambda: calls.append("inner"))

        scheduler.call_later(10, outer)

        scheduler.advance(15)
        assert calls == ["outer"]

        scheduler.advance(5)
        assert calls == ["outer", "inner"]

    @pytest.mark.unit
    def test_cancelled_handle_does_not_run(self, scheduler):
        calls = []
        handle = scheduler.call_later(10, lambda: calls.append("ran"))

        handle.cancel()

        assert scheduler.pending_count() == 0
        assert scheduler.advance(100) == 0
        assert calls == []

    @pytest.mark.unit
    def test_advance_to(self, scheduler):
        start = scheduler.now_ms()
        calls = []
        scheduler.call_later(500, lambda: calls.append("ran"))

        scheduler.advance_to(start + 500)
        assert calls == ["ran"]

        # Targets in the past leave the clock where it is
        scheduler.advance_to(start)
        assert scheduler.now_ms() == start + 500

    @pytest.mark.unit
    @pytest.mark.parametrize("delta", [-1, float("nan"), float("inf")])
    def test_invalid_advance(self, scheduler, delta):
        with pytest.raises(ValueError, match="delta_ms"):
            scheduler.advance(delta)

    @pytest.mark.unit
    @pytest.mark.parametrize("delay", [-1, float("nan"), float("inf")])
    def test_invalid_delay(self, scheduler, delay):
        with pytest.raises(ValueError, match="delay_ms"):
            scheduler.call_later(delay, lambda: None)

    @pytest.mark.unit
    def test_next_due_and_statistics(self, scheduler):
        start = scheduler.now_ms()
        assert scheduler.next_due_ms() is None

        scheduler.call_later(30, lambda: None)
        cancelled = scheduler.call_later(10, lambda: None)
        cancelled.cancel()

        assert scheduler.next_due_ms() == start + 30

        scheduler.advance(30)
        assert scheduler.get_statistics() == {
            "now_ms": start + 30,
            "pending_count": 0,
            "fired_count": 1,
        }

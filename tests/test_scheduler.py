"""Tests for the virtual-clock scheduler."""

from honeycomb.scheduler import Scheduler


class TestScheduler:
    """Test ordering, nesting and cancellation of deferred actions."""

    def test_fires_in_time_then_insertion_order(self, scheduler):
        fired = []
        scheduler.call_later(200, fired.append, "c")
        scheduler.call_later(100, fired.append, "a")
        scheduler.call_later(100, fired.append, "b")
        assert scheduler.advance(300) == 3
        assert fired == ["a", "b", "c"]

    def test_not_due_yet(self, scheduler):
        fired = []
        scheduler.call_later(100, fired.append, 1)
        scheduler.advance(50)
        assert fired == []
        scheduler.advance(50)
        assert fired == [1]
        assert scheduler.now == 100

    def test_nested_delay_measured_from_fire_time(self, scheduler):
        seen = []

        def first():
            seen.append(scheduler.now)
            scheduler.call_later(30, lambda: seen.append(scheduler.now))

        scheduler.call_later(100, first)
        scheduler.advance(1000)
        assert seen == [100, 130]
        assert scheduler.now == 1000

    def test_cancel(self, scheduler):
        fired = []
        timer = scheduler.call_later(10, fired.append, 1)
        scheduler.call_later(20, fired.append, 2)
        timer.cancel()
        assert len(scheduler) == 1
        scheduler.advance(100)
        assert fired == [2]

    def test_clear(self, scheduler):
        fired = []
        scheduler.call_later(10, fired.append, 1)
        scheduler.clear()
        assert len(scheduler) == 0
        scheduler.advance(100)
        assert fired == []

    def test_negative_delay_runs_next_advance(self):
        scheduler = Scheduler(now=500)
        fired = []
        scheduler.call_later(-20, fired.append, 1)
        scheduler.advance(0)
        assert fired == [1]

"""Tests for the Growth Scheduler (pytest-qt)."""
import pytest

from pythagorastree.config import DEFAULT_CONFIG
from pythagorastree.controller.growth import GrowthScheduler


@pytest.fixture
def scheduler(qtbot):
    s = GrowthScheduler(maximum_depth=3, interval_ms=1)
    yield s
    s.stop()


def record(signal):
    values = []
    signal.connect(values.append)
    return values


class TestGrowthScheduler:

    def test_initial_state(self, scheduler):
        assert scheduler.depth_limit == 0
        assert not scheduler.is_running()
        assert not scheduler.is_finished()

    def test_manual_ticks_are_monotonic(self, scheduler):
        depths = record(scheduler.depth_changed)

        for _ in range(5):
            scheduler.tick()

        assert depths == [1, 2, 3]
        assert scheduler.depth_limit == 3
        assert scheduler.is_finished()
        assert not scheduler.is_running()

    def test_tick_rearms_timer_until_maximum(self, scheduler):
        scheduler.tick()
        assert scheduler.is_running()

        scheduler.tick()
        scheduler.tick()
        assert not scheduler.is_running()

    def test_runs_to_maximum(self, qtbot, scheduler):
        depths = record(scheduler.depth_changed)

        with qtbot.waitSignal(scheduler.finished, timeout=2000):
            scheduler.start()

        assert depths == [1, 2, 3]
        assert not scheduler.is_running()

    def test_no_ticks_after_maximum(self, qtbot, scheduler):
        with qtbot.waitSignal(scheduler.finished, timeout=2000):
            scheduler.start()

        depths = record(scheduler.depth_changed)
        scheduler.start()
        qtbot.wait(20)

        assert depths == []
        assert scheduler.depth_limit == 3

    def test_next_tick_is_requested_after_listeners(self, qtbot, scheduler):
        running_during_tick = []
        scheduler.depth_changed.connect(lambda _: running_during_tick.append(scheduler.is_running()))

        with qtbot.waitSignal(scheduler.finished, timeout=2000):
            scheduler.start()

        assert running_during_tick == [False, False, False]

    def test_stop_keeps_depth(self, scheduler):
        scheduler.tick()
        scheduler.stop()

        assert scheduler.depth_limit == 1
        assert not scheduler.is_running()

    def test_reset(self, scheduler):
        scheduler.tick()
        scheduler.tick()
        scheduler.reset()

        assert scheduler.depth_limit == 0
        assert not scheduler.is_running()

    def test_start_is_idempotent(self, qtbot, scheduler):
        depths = record(scheduler.depth_changed)

        with qtbot.waitSignal(scheduler.finished, timeout=2000):
            scheduler.start()
            scheduler.start()

        assert depths == [1, 2, 3]

    def test_zero_maximum_never_ticks(self, qtbot):
        s = GrowthScheduler(maximum_depth=0, interval_ms=1)
        s.start()

        assert not s.is_running()
        assert s.is_finished()

    def test_defaults_follow_config(self, qtbot):
        s = GrowthScheduler()

        assert s.maximum_depth == DEFAULT_CONFIG.maximum_depth
        assert s.interval_ms == DEFAULT_CONFIG.tick_interval_ms

    def test_sync_depth_continues_from_new_value(self, scheduler):
        depths = record(scheduler.depth_changed)
        scheduler.tick()
        scheduler.tick()

        scheduler.sync_depth(0)
        scheduler.tick()

        assert depths == [1, 2, 1]
        assert scheduler.depth_limit == 1

    @pytest.mark.parametrize("depth, expected", [(-4, 0), (2, 2), (9, 3)])
    def test_sync_depth_is_clamped(self, scheduler, depth, expected):
        scheduler.sync_depth(depth)

        assert scheduler.depth_limit == expected

    def test_sync_depth_does_not_start_timer(self, scheduler):
        scheduler.sync_depth(1)

        assert not scheduler.is_running()
        assert not scheduler.is_finished()

    def test_sync_to_maximum_finishes(self, scheduler):
        depths = record(scheduler.depth_changed)
        scheduler.sync_depth(3)
        scheduler.tick()

        assert depths == []
        assert scheduler.is_finished()

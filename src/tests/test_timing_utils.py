"""Tests for the OnceInMs throttle and the keyed TimerWheel."""

import pytest

from utils import OnceInMs, TimerWheel


class TestOnceInMs:
    def test_first_call_always_executes(self, clock):
        throttle = OnceInMs(1000 / 32, clock)
        assert throttle.should_execute()

    def test_drops_calls_inside_interval(self, clock):
        throttle = OnceInMs(100, clock)
        assert throttle.should_execute(10.0)
        assert not throttle.should_execute(10.05)
        assert not throttle.should_execute(10.099)
        assert throttle.should_execute(10.11)

    def test_dropped_calls_do_not_move_the_window(self):
        throttle = OnceInMs(100)
        throttle.should_execute(0.0)
        for t in (0.02, 0.04, 0.06, 0.08):
            assert not throttle.should_execute(t)
        assert throttle.should_execute(0.1)

    def test_reset_allows_immediate_execution(self, clock):
        throttle = OnceInMs(1000, clock)
        assert throttle.should_execute()
        assert not throttle.should_execute()
        throttle.reset()
        assert throttle.should_execute()

    def test_elapsed_and_remaining(self, clock):
        throttle = OnceInMs(100, clock)
        assert throttle.elapsed_ms() is None
        assert throttle.remaining_ms() == 0.0
        throttle.should_execute()
        clock.advance(0.04)
        assert throttle.elapsed_ms() == pytest.approx(40)
        assert throttle.remaining_ms() == pytest.approx(60)


class TestTimerWheel:
    def test_fires_only_when_due(self, clock):
        wheel = TimerWheel(clock)
        fired = []
        wheel.schedule("a", 1.0, fired.append)

        assert wheel.advance(clock.now + 0.5) == 0
        assert fired == []
        assert wheel.advance(clock.now + 1.0) == 1
        assert fired == [pytest.approx(clock.now + 1.0)]
        assert wheel.pending_keys() == []

    def test_fires_in_deadline_then_schedule_order(self, clock):
        wheel = TimerWheel(clock)
        order = []
        wheel.schedule("late", 2.0, lambda at: order.append("late"))
        wheel.schedule("tie_first", 1.0, lambda at: order.append("tie_first"))
        wheel.schedule("tie_second", 1.0, lambda at: order.append("tie_second"))

        wheel.advance(clock.now + 5.0)

        assert order == ["tie_first", "tie_second", "late"]

    def test_rescheduling_a_key_replaces_the_pending_timer(self, clock):
        wheel = TimerWheel(clock)
        fired = []
        wheel.schedule("hint_hide", 3.0, lambda at: fired.append(("old", at)))
        clock.advance(2.0)
        wheel.schedule("hint_hide", 3.0, lambda at: fired.append(("new", at)))

        wheel.advance(clock.now + 1.5)
        assert fired == []

        wheel.advance(clock.now + 3.0)
        assert fired == [("new", pytest.approx(clock.now + 3.0))]
        assert len(wheel) == 0

    def test_cancel(self, clock):
        wheel = TimerWheel(clock)
        fired = []
        wheel.schedule("a", 1.0, fired.append)

        assert wheel.cancel("a")
        assert not wheel.cancel("a")
        wheel.advance(clock.now + 10)
        assert fired == []

    def test_cancel_prefix(self, clock):
        wheel = TimerWheel(clock)
        wheel.schedule("intro_meeting", 1.0, lambda at: None)
        wheel.schedule("intro_handoff", 2.0, lambda at: None)
        wheel.schedule("hint_hide", 3.0, lambda at: None)

        cancelled = wheel.cancel_prefix("intro_")

        assert sorted(cancelled) == ["intro_handoff", "intro_meeting"]
        assert wheel.pending_keys() == ["hint_hide"]

    def test_chained_timers_due_in_same_advance_all_fire(self, clock):
        wheel = TimerWheel(clock)
        fired = []

        def first(at):
            fired.append("first")
            wheel.schedule("second", 0.5, lambda at2: fired.append("second"), now=at)

        wheel.schedule("first", 1.0, first)
        wheel.advance(clock.now + 2.0)

        assert fired == ["first", "second"]

    def test_chained_timer_is_anchored_to_deadline_not_loop_time(self, clock):
        wheel = TimerWheel(clock)
        start = clock.now

        def first(at):
            wheel.schedule("second", 0.5, lambda at2: None, now=at)

        wheel.schedule("first", 1.0, first)
        wheel.advance(start + 1.3)  # late frame

        assert wheel.deadline_of("second") == pytest.approx(start + 1.5)

    def test_negative_delay_rejected(self, clock):
        wheel = TimerWheel(clock)
        with pytest.raises(ValueError):
            wheel.schedule("a", -0.1, lambda at: None)

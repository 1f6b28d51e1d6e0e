"""Tests for PointerEvent validation and the two gesture recognizers."""

import pytest

from input_system import (DragPhase, DragTracker, DragUpdateKind, HostCommand, LongPressDetector,
                          LongPressPhase, LongPressUpdate, PointerEvent, PointerEventKind,
                          ScriptedPointerSource, ScriptStep)


class TestPointerEvent:
    def test_down_requires_position(self):
        with pytest.raises(ValueError):
            PointerEvent(PointerEventKind.DOWN, timestamp=0.0)

    def test_up_without_position_is_valid(self):
        event = PointerEvent.up(1.0)
        assert event.position is None

    def test_rejects_non_numeric_coordinates(self):
        with pytest.raises(TypeError):
            PointerEvent(PointerEventKind.MOVE, "10", 20, 0.0)

    def test_rejects_bad_kind(self):
        with pytest.raises(TypeError):
            PointerEvent("down", 1, 2, 0.0)

    def test_position_is_float_tuple(self):
        assert PointerEvent.move(3, 4, 0.0).position == (3.0, 4.0)


class TestDragTracker:
    def test_down_move_up_cycle(self):
        tracker = DragTracker(haptic_interval=1 / 32)

        started = tracker.handle(PointerEvent.down(10, 20, 0.0))
        moved = tracker.handle(PointerEvent.move(15, 25, 0.1))
        ended = tracker.handle(PointerEvent.up(0.2))

        assert started.kind is DragUpdateKind.STARTED
        assert moved.kind is DragUpdateKind.MOVED
        assert moved.position == (15.0, 25.0)
        assert ended.kind is DragUpdateKind.ENDED
        assert tracker.phase is DragPhase.IDLE

    def test_up_while_idle_is_ignored(self):
        tracker = DragTracker(haptic_interval=1 / 32)
        assert tracker.handle(PointerEvent.up(0.0)) is None

    def test_move_while_idle_starts_tracking(self):
        tracker = DragTracker(haptic_interval=1 / 32)
        update = tracker.handle(PointerEvent.move(1, 1, 0.0))
        assert update.kind is DragUpdateKind.STARTED

    def test_haptics_throttled_to_rate(self):
        tracker = DragTracker(haptic_interval=1 / 32)
        tracker.handle(PointerEvent.down(0, 0, 0.0))

        due = [tracker.handle(PointerEvent.move(i, i, i * 0.01)).haptic_due for i in range(1, 7)]

        # 1/32s = 31.25ms: only the move at 40ms is far enough from the press
        assert due == [False, False, False, True, False, False]

    def test_reset_rearms_throttle(self):
        tracker = DragTracker(haptic_interval=1 / 32)
        tracker.handle(PointerEvent.down(0, 0, 0.0))
        tracker.reset()

        update = tracker.handle(PointerEvent.move(1, 1, 0.001))

        assert update.kind is DragUpdateKind.STARTED
        assert update.haptic_due


class TestLongPressDetector:
    def test_fires_after_uninterrupted_hold(self):
        detector = LongPressDetector(0.5)

        assert detector.handle(PointerEvent.down(0, 0, 10.0)) == [LongPressUpdate.BEGAN]
        assert detector.check(10.49) == []
        assert detector.check(10.5) == [LongPressUpdate.FIRED]
        assert detector.check(11.0) == []

    def test_movement_does_not_cancel(self):
        detector = LongPressDetector(0.5)
        detector.handle(PointerEvent.down(0, 0, 0.0))
        for i in range(1, 5):
            assert detector.handle(PointerEvent.move(i * 50, i * 50, i * 0.1)) == []
        assert detector.check(0.55) == [LongPressUpdate.FIRED]

    def test_early_release_cancels_without_carry_over(self):
        detector = LongPressDetector(0.5)
        detector.handle(PointerEvent.down(0, 0, 0.0))
        assert detector.handle(PointerEvent.up(0.49)) == [LongPressUpdate.CANCELLED]

        detector.handle(PointerEvent.down(0, 0, 0.6))
        assert detector.check(1.0) == []
        assert detector.check(1.15) == [LongPressUpdate.FIRED]

    def test_release_after_deadline_fires_before_ending(self):
        detector = LongPressDetector(0.5)
        detector.handle(PointerEvent.down(0, 0, 0.0))

        assert detector.handle(PointerEvent.up(0.7)) == [LongPressUpdate.FIRED, LongPressUpdate.ENDED]

    def test_reset_abandons_countdown(self):
        detector = LongPressDetector(0.5)
        detector.handle(PointerEvent.down(0, 0, 0.0))
        detector.reset()
        assert detector.check(5.0) == []
        assert detector.phase is LongPressPhase.IDLE


class TestScriptedPointerSource:
    def test_replays_steps_when_due(self, clock):
        source = ScriptedPointerSource([
            ScriptStep(0.0, PointerEventKind.DOWN, 5, 5),
            ScriptStep(0.5, PointerEventKind.UP),
            ScriptStep(0.6, command=HostCommand.QUIT),
        ], clock)

        first = source.poll()
        assert [event.kind for event in first] == [PointerEventKind.DOWN]
        assert first[0].timestamp == clock.now

        clock.advance(1.0)
        second = source.poll()
        assert [event.kind for event in second] == [PointerEventKind.UP]
        assert second[0].timestamp == pytest.approx(clock.now - 0.5)
        assert source.drain_commands() == [HostCommand.QUIT]
        assert source.drain_commands() == []

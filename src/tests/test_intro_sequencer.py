"""Timeline tests for the scripted intro."""

import pytest

from sequencer_system import IntroConfig, IntroPhase

ALL_PHASES = (IntroPhase.IDLE, IntroPhase.CONVERGING, IntroPhase.MEETING,
              IntroPhase.HOLDING, IntroPhase.DIVERGING, IntroPhase.DONE)


def test_start_opens_door_and_slides_titles_in(make_intro, sink, recorder, timers, clock):
    intro = make_intro()
    intro.start()

    assert intro.phase is IntroPhase.CONVERGING
    assert sink.calls == [("door_open",), ("haptic_continuous", 0.3, 0.2, 3.0)]
    offsets = [(frame.intro_offsets, frame.transition_s) for _, frame in recorder.frames]
    assert offsets == [((-390.0, 390.0), 0.0), ((0.0, 0.0), 3.0)]
    assert timers.pending_keys() == ["intro_meeting", "intro_handoff"]
    assert timers.deadline_of("intro_handoff") == pytest.approx(clock.now + 4.7)


def test_default_timeline(make_intro, sink, timers, clock):
    intro = make_intro()
    done_at = []
    intro.on_done = done_at.append
    start = clock.now
    intro.start()

    intro.tick(start + 2.99)
    assert intro.phase is IntroPhase.CONVERGING

    intro.tick(start + 3.0)
    assert intro.phase is IntroPhase.MEETING
    assert sink.calls[-1] == ("haptic_pulse", 0.8, 0.5)

    intro.tick(start + 3.75)
    assert intro.phase is IntroPhase.HOLDING

    intro.tick(start + 4.6)
    assert intro.phase is IntroPhase.HOLDING

    intro.tick(start + 4.8)
    assert intro.is_done
    assert intro.state.history == ALL_PHASES
    assert done_at == [pytest.approx(start + 4.7)]
    assert len(timers) == 0


def test_diverging_cues(make_intro, sink, clock):
    intro = make_intro()
    start = clock.now
    intro.start()
    intro.tick(start + 10.0)

    assert sink.count("door_open") == 1
    assert sink.count("door_close") == 1
    assert sink.count("haptic_continuous") == 2
    assert sink.pulses() == [("haptic_pulse", 0.8, 0.5), ("haptic_pulse", 0.8, 0.5)]
    close = sink.names().index("door_close")
    assert sink.names()[close:close + 3] == ["door_close", "haptic_pulse", "haptic_continuous"]
    assert (intro.state.top_offset, intro.state.bottom_offset) == (390.0, -390.0)


def test_handoff_catches_up_when_phases_run_long(make_intro, sink, timers, clock):
    intro = make_intro(IntroConfig(slow_duration=2.0, pause_duration=2.0))
    start = clock.now
    intro.start()
    intro.tick(start + 3.0)
    assert intro.phase is IntroPhase.MEETING

    intro.tick(start + 4.7)

    assert intro.is_done
    assert intro.state.history == ALL_PHASES
    assert sink.count("door_close") == 1
    assert len(timers) == 0

    intro.tick(start + 20.0)
    assert sink.count("door_close") == 1


def test_short_total_duration_still_visits_every_phase(make_intro, clock):
    intro = make_intro(IntroConfig(total_duration=1.0))
    start = clock.now
    intro.start()

    intro.tick(start + 1.0)

    assert intro.state.history == ALL_PHASES


def test_long_total_duration_waits_in_diverging(make_intro, clock):
    intro = make_intro(IntroConfig(total_duration=6.0))
    start = clock.now
    intro.start()

    intro.tick(start + 5.0)
    assert intro.phase is IntroPhase.DIVERGING

    intro.tick(start + 6.0)
    assert intro.is_done


def test_start_only_once(make_intro):
    intro = make_intro()
    intro.start()
    with pytest.raises(RuntimeError):
        intro.start()


def test_phase_order_helpers():
    assert IntroPhase.IDLE.next is IntroPhase.CONVERGING
    assert IntroPhase.DIVERGING.next is IntroPhase.DONE
    assert IntroPhase.DONE.next is None
    assert IntroPhase.MEETING.timer_key == "intro_meeting"

"""End-to-end session tests driven by a scripted pointer source and a fake clock."""

from input_system import HostCommand, PointerEventKind, ScriptedPointerSource, ScriptStep
from sequencer_system import AppConfig, InteractionState, SessionManager, SurfaceConfig


def run_session(session, clock, seconds, step=0.05):
    start = clock.now
    for i in range(int(seconds / step) + 1):
        clock.now = start + i * step
        session.update()
        if not session.running:
            break


def make_session(config, steps, sink, recorder, logger, clock):
    return SessionManager(
        config=config,
        pointer_source=ScriptedPointerSource(steps, clock),
        sink=sink,
        surface=recorder,
        logger=logger,
        clock=clock,
    )


def test_full_session(sink, recorder, logger, clock):
    config = AppConfig(surface=SurfaceConfig(width=400, height=800))
    steps = [
        ScriptStep(1.0, PointerEventKind.DOWN, 200, 400),   # during intro: ignored
        ScriptStep(1.2, PointerEventKind.UP),
        ScriptStep(6.0, PointerEventKind.DOWN, 200, 400),
        ScriptStep(7.0, PointerEventKind.UP),
        ScriptStep(8.0, command=HostCommand.RESET),
        ScriptStep(9.0, command=HostCommand.QUIT),
    ]
    session = make_session(config, steps, sink, recorder, logger, clock)
    assert session.get_current_stage_name() == "IntroStage"

    run_session(session, clock, 12.0)

    assert not session.running
    assert session.get_current_stage_name() == "InteractionStage"

    names = sink.names()
    assert names.index("torch_on") > names.index("door_close")
    assert sink.count("torch_on") == 1
    assert sink.count("welcome") == 1
    assert sink.count("torch_off") == 2  # release, then reset
    assert session.current_stage.engine.state == InteractionState.initial(150.0)

    session.stop()
    assert len(session.timers) == 0


def test_skip_intro_starts_in_interaction(sink, recorder, logger, clock):
    config = AppConfig(skip_intro=True)
    session = make_session(config, [ScriptStep(0.5, command=HostCommand.QUIT)],
                           sink, recorder, logger, clock)

    assert session.get_current_stage_name() == "InteractionStage"
    run_session(session, clock, 1.0)

    assert not session.running
    assert sink.count("door_open") == 0
    assert recorder.render_count > 0


def test_intro_hands_off_without_input(sink, recorder, logger, clock):
    session = make_session(AppConfig(), [], sink, recorder, logger, clock)

    run_session(session, clock, 4.6)
    assert session.get_current_stage_name() == "IntroStage"

    run_session(session, clock, 0.5)
    assert session.get_current_stage_name() == "InteractionStage"
    assert recorder.last.hint_variant.text == "Tap and explore around"

"""Shared test fixtures for The Dark sequencer tests."""

from typing import List, Tuple

import pytest

from feedback_system import IFeedbackSink
from render_system import FrameRecorder
from sequencer_system import (AppConfig, InteractionConfig, InteractionEngine, IntroConfig,
                              IntroSequencer, SurfaceConfig)
from utils import HybridLogger, TimerWheel


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class RecordingFeedbackSink(IFeedbackSink):
    """Records every call as (name, args) in order"""

    def __init__(self):
        self.calls: List[Tuple] = []

    def torch_on(self):
        self.calls.append(("torch_on",))

    def torch_off(self):
        self.calls.append(("torch_off",))

    def welcome(self):
        self.calls.append(("welcome",))

    def door_open(self):
        self.calls.append(("door_open",))

    def door_close(self):
        self.calls.append(("door_close",))

    def haptic_pulse(self, intensity, sharpness):
        self.calls.append(("haptic_pulse", intensity, sharpness))

    def haptic_continuous(self, intensity, sharpness, duration):
        self.calls.append(("haptic_continuous", intensity, sharpness, duration))

    def stop_all(self):
        self.calls.append(("stop_all",))

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def count(self, name: str) -> int:
        return self.names().count(name)

    def pulses(self) -> List[Tuple]:
        return [call for call in self.calls if call[0] == "haptic_pulse"]

    def clear(self):
        self.calls.clear()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def sink():
    return RecordingFeedbackSink()


@pytest.fixture()
def recorder():
    return FrameRecorder()


@pytest.fixture()
def hybrid_logger():
    """Console-less, file-less logger"""
    logger = HybridLogger("test", log_dir=None, console=False)
    yield logger
    logger.cleanup()


@pytest.fixture()
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test")


@pytest.fixture()
def timers(clock):
    return TimerWheel(clock)


@pytest.fixture()
def surface_config():
    return SurfaceConfig(width=400, height=800)


@pytest.fixture()
def make_engine(clock, sink, recorder, timers, logger, surface_config):
    """Factory for an activated InteractionEngine on a 400x800 surface"""

    def _make(config: InteractionConfig = None, activate: bool = True) -> InteractionEngine:
        engine = InteractionEngine(
            config=config or InteractionConfig(),
            surface_config=surface_config,
            sink=sink,
            surface=recorder,
            timers=timers,
            logger=logger,
            clock=clock,
        )
        if activate:
            engine.activate()
        return engine

    return _make


@pytest.fixture()
def make_intro(clock, sink, recorder, timers, logger):
    """Factory for an IntroSequencer on a 390-point-wide surface"""

    def _make(config: IntroConfig = None) -> IntroSequencer:
        return IntroSequencer(
            config=config or IntroConfig(),
            surface_width=390,
            sink=sink,
            surface=recorder,
            timers=timers,
            logger=logger,
            clock=clock,
        )

    return _make


@pytest.fixture()
def app_config(surface_config):
    return AppConfig(surface=surface_config)

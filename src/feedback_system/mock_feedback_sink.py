"""
Mock Feedback Sink - No-op implementation for running without audio or haptics
"""

from .interfaces import IFeedbackSink


class MockFeedbackSink(IFeedbackSink):
    """
    Logs every cue instead of playing it.

    Tracks which torch and door cue is currently "sounding" so the
    mutual-exclusion rule can be observed in the log.
    """

    def __init__(self, logger):
        self.logger = logger
        self.torch_cue = None
        self.door_cue = None
        self.cue_count = 0
        self.logger.info("🔇 MockFeedbackSink initialized (audio and haptics disabled)")

    def _cue(self, name: str) -> None:
        self.cue_count += 1
        self.logger.debug(f"Mock: cue {name}")

    def torch_on(self) -> None:
        if self.torch_cue == "torch_off":
            self.logger.debug("Mock: stopping torch_off")
        self.torch_cue = "torch_on"
        self._cue("torch_on")

    def torch_off(self) -> None:
        if self.torch_cue == "torch_on":
            self.logger.debug("Mock: stopping torch_on")
        self.torch_cue = "torch_off"
        self._cue("torch_off")

    def welcome(self) -> None:
        self._cue("welcome")

    def door_open(self) -> None:
        self.door_cue = "door_open"
        self._cue("door_open")

    def door_close(self) -> None:
        self.door_cue = "door_close"
        self._cue("door_close")

    def haptic_pulse(self, intensity: float, sharpness: float) -> None:
        self.logger.debug(f"Mock: haptic pulse intensity={intensity:.2f} sharpness={sharpness:.2f}")

    def haptic_continuous(self, intensity: float, sharpness: float, duration: float) -> None:
        self.logger.debug(
            f"Mock: haptic buzz intensity={intensity:.2f} sharpness={sharpness:.2f} for {duration:.1f}s"
        )

    def stop_all(self) -> None:
        self.torch_cue = None
        self.door_cue = None
        self.logger.debug("Mock: stop all")

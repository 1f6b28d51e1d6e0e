"""
Abstract interface for audio and haptic feedback
"""

from abc import ABC, abstractmethod


class IFeedbackSink(ABC):
    """
    Fire-and-forget audio cues and haptic pulses.

    Callers never wait for a cue to finish. Implementations must swallow
    their own failures (missing files, no audio device, no haptics) so
    the sequencer behaves as if every cue played.

    Torch-on/torch-off are mutually exclusive: starting one stops the
    other. Door-open/door-close behave the same way. Welcome is an
    independent channel.
    """

    @abstractmethod
    def torch_on(self) -> None:
        pass

    @abstractmethod
    def torch_off(self) -> None:
        pass

    @abstractmethod
    def welcome(self) -> None:
        pass

    @abstractmethod
    def door_open(self) -> None:
        pass

    @abstractmethod
    def door_close(self) -> None:
        pass

    @abstractmethod
    def haptic_pulse(self, intensity: float, sharpness: float) -> None:
        """
        Play a single transient haptic event.

        Args:
            intensity: Strength 0.0-1.0
            sharpness: Character 0.0 (round) to 1.0 (crisp)
        """
        pass

    @abstractmethod
    def haptic_continuous(self, intensity: float, sharpness: float, duration: float) -> None:
        """
        Play a sustained haptic buzz.

        Args:
            intensity: Strength 0.0-1.0
            sharpness: Character 0.0-1.0
            duration: Seconds
        """
        pass

    @abstractmethod
    def stop_all(self) -> None:
        """Stop every sound and haptic currently playing"""
        pass

    def cleanup(self) -> None:
        """Release audio/haptic devices (override if needed)"""
        pass

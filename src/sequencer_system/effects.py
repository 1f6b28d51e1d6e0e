"""
Side effects produced by sequencer transitions
"""

import enum
from dataclasses import dataclass
from typing import Iterable, List, Union

from feedback_system import IFeedbackSink


class Cue(enum.Enum):
    TORCH_ON = "torch_on"
    TORCH_OFF = "torch_off"
    WELCOME = "welcome"
    DOOR_OPEN = "door_open"
    DOOR_CLOSE = "door_close"


@dataclass(frozen=True)
class PlayCue:
    cue: Cue


@dataclass(frozen=True)
class HapticPulse:
    intensity: float
    sharpness: float


@dataclass(frozen=True)
class HapticContinuous:
    intensity: float
    sharpness: float
    duration: float


@dataclass(frozen=True)
class ScheduleTimer:
    key: str
    delay: float


@dataclass(frozen=True)
class AnimateTransition:
    """Nominal duration for the surface to animate into the new state"""
    duration: float


Effect = Union[PlayCue, HapticPulse, HapticContinuous, ScheduleTimer, AnimateTransition]


def apply_feedback(sink: IFeedbackSink, effects: Iterable[Effect]) -> List[Effect]:
    """
    Send the feedback effects to the sink, in order.

    Returns:
        The effects that are not feedback (timers, transitions), for the caller
    """
    remaining: List[Effect] = []
    for effect in effects:
        if isinstance(effect, PlayCue):
            getattr(sink, effect.cue.value)()
        elif isinstance(effect, HapticPulse):
            sink.haptic_pulse(effect.intensity, effect.sharpness)
        elif isinstance(effect, HapticContinuous):
            sink.haptic_continuous(effect.intensity, effect.sharpness, effect.duration)
        else:
            remaining.append(effect)
    return remaining


def transition_duration(effects: Iterable[Effect], default: float = 0.0) -> float:
    """Longest AnimateTransition among the effects"""
    durations = [effect.duration for effect in effects if isinstance(effect, AnimateTransition)]
    return max(durations) if durations else default

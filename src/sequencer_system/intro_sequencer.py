"""
Intro sequencer - the scripted "Welcome To / The Dark" opening
"""

import enum
import time
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from render_system import VisualFrame
from .config import IntroConfig
from .effects import (AnimateTransition, Cue, Effect, HapticContinuous, HapticPulse, PlayCue,
                      ScheduleTimer, apply_feedback, transition_duration)

if TYPE_CHECKING:
    from feedback_system import IFeedbackSink
    from render_system import IRenderSurface
    from utils import ClassLogger, TimerWheel


TIMER_PREFIX = "intro_"
HANDOFF_TIMER = "intro_handoff"


class IntroPhase(enum.Enum):
    IDLE = 0
    CONVERGING = 1
    MEETING = 2
    HOLDING = 3
    DIVERGING = 4
    DONE = 5

    @property
    def next(self) -> Optional['IntroPhase']:
        if self is IntroPhase.DONE:
            return None
        return IntroPhase(self.value + 1)

    @property
    def timer_key(self) -> str:
        return TIMER_PREFIX + self.name.lower()


@dataclass(frozen=True)
class IntroState:
    """
    Phase of the intro plus the horizontal offsets of the two titles.

    The offsets are always equal in magnitude and opposite in sign.
    """
    phase: IntroPhase = IntroPhase.IDLE
    top_offset: float = 0.0
    bottom_offset: float = 0.0
    started_at: Optional[float] = None
    history: Tuple[IntroPhase, ...] = field(default=(IntroPhase.IDLE,))


class IntroSequencer:
    """
    Fire-and-forget, single-shot timeline.

    Timeline (defaults):
        0.0s  CONVERGING  door-open, 3s buzz, titles slide in from the edges
        3.0s  MEETING     hammer pulse, 0.7s hold transition
        3.7s  HOLDING     titles pinned at center for 1.0s
        4.7s  DIVERGING   door-close, hammer, 3s buzz, titles slide out
        4.7s  DONE        hand-off

    The hand-off timer is armed at start on its own deadline. If it fires
    while the phase chain is still running (e.g. with overridden phase
    durations), the remaining phases are entered immediately, in order,
    so every phase is still visited exactly once.
    Pointer input has no effect during playback.
    """

    def __init__(self,
                 config: IntroConfig,
                 surface_width: float,
                 sink: 'IFeedbackSink',
                 surface: 'IRenderSurface',
                 timers: 'TimerWheel',
                 logger: 'ClassLogger',
                 clock: Callable[[], float] = time.monotonic,
                 on_done: Optional[Callable[[float], None]] = None):
        self.config = config
        self.width = float(surface_width)
        self.sink = sink
        self.surface = surface
        self.timers = timers
        self.logger = logger
        self.clock = clock
        self.on_done = on_done
        self.state = IntroState()

    @property
    def phase(self) -> IntroPhase:
        return self.state.phase

    @property
    def is_done(self) -> bool:
        return self.state.phase is IntroPhase.DONE

    def start(self, now: Optional[float] = None) -> None:
        """Activate the intro; may only be called once"""
        if self.state.phase is not IntroPhase.IDLE:
            raise RuntimeError(f"Intro already started (phase {self.state.phase.name})")
        current = self.clock() if now is None else now

        self.state = replace(self.state, top_offset=-self.width, bottom_offset=self.width,
                             started_at=current)
        self._publish(current, 0.0)

        self.timers.schedule(HANDOFF_TIMER, self.config.total_duration, self._handoff, now=current)
        self._enter(IntroPhase.CONVERGING, current)

    def tick(self, now: Optional[float] = None) -> None:
        self.timers.advance(now)

    def _entry_effects(self, phase: IntroPhase) -> Tuple[Tuple[float, float], List[Effect]]:
        """Target offsets and effects for entering `phase`"""
        config = self.config
        buzz = HapticContinuous(config.buzz_intensity, config.buzz_sharpness, config.fast_duration)
        hammer = HapticPulse(config.hammer_intensity, config.hammer_sharpness)

        if phase is IntroPhase.CONVERGING:
            return (0.0, 0.0), [PlayCue(Cue.DOOR_OPEN), buzz,
                                AnimateTransition(config.fast_duration),
                                ScheduleTimer(IntroPhase.MEETING.timer_key, config.fast_duration)]
        if phase is IntroPhase.MEETING:
            # Slow-down transition with no visual change
            return (0.0, 0.0), [hammer, AnimateTransition(config.slow_duration),
                                ScheduleTimer(IntroPhase.HOLDING.timer_key, config.slow_duration)]
        if phase is IntroPhase.HOLDING:
            return (0.0, 0.0), [ScheduleTimer(IntroPhase.DIVERGING.timer_key, config.pause_duration)]
        if phase is IntroPhase.DIVERGING:
            return (self.width, -self.width), [PlayCue(Cue.DOOR_CLOSE), hammer, buzz,
                                               AnimateTransition(config.fast_duration)]
        return (self.state.top_offset, self.state.bottom_offset), []

    def _enter(self, phase: IntroPhase, at: float) -> None:
        if phase is not self.state.phase.next:
            self.logger.debug(f"Ignoring out-of-order phase {phase.name} (current {self.state.phase.name})")
            return

        offsets, effects = self._entry_effects(phase)
        self.state = replace(self.state, phase=phase, top_offset=offsets[0], bottom_offset=offsets[1],
                             history=self.state.history + (phase,))
        elapsed = at - self.state.started_at
        self.logger.info(f"Intro phase → {phase.name} at +{elapsed:.2f}s")

        for effect in apply_feedback(self.sink, effects):
            if isinstance(effect, ScheduleTimer):
                next_phase = IntroPhase[effect.key[len(TIMER_PREFIX):].upper()]
                self.timers.schedule(effect.key, effect.delay,
                                     lambda deadline, p=next_phase: self._enter(p, deadline), now=at)

        if phase is not IntroPhase.DONE:
            self._publish(at, transition_duration(effects))

    def _handoff(self, deadline: float) -> None:
        """Hard stop at total_duration: finish the phase chain and hand off"""
        while self.state.phase.next is not IntroPhase.DONE:
            self.logger.debug(f"Hand-off catching up from {self.state.phase.name}")
            self._enter(self.state.phase.next, deadline)

        self.timers.cancel_prefix(TIMER_PREFIX)
        self._enter(IntroPhase.DONE, deadline)
        self.logger.info("Intro done: handing off")
        if self.on_done:
            self.on_done(deadline)

    def frame(self, transition_s: float = 0.0) -> VisualFrame:
        return VisualFrame(intro_offsets=(self.state.top_offset, self.state.bottom_offset),
                           transition_s=transition_s)

    def _publish(self, at: float, transition_s: float) -> None:
        self.surface.apply(self.frame(transition_s), at)

"""
Scripted pointer source - replays a fixed gesture script against the clock
"""

import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .interfaces import IPointerSource
from .pointer_event import HostCommand, PointerEvent, PointerEventKind


@dataclass(frozen=True)
class ScriptStep:
    """One scripted input, `at` seconds after the source starts"""
    at: float
    kind: Optional[PointerEventKind] = None
    x: Optional[float] = None
    y: Optional[float] = None
    command: Optional[HostCommand] = None


class ScriptedPointerSource(IPointerSource):
    """
    Replays ScriptStep entries once their time has come.

    Used for headless demo runs and to drive the full session in tests
    without a window.
    """

    def __init__(self, steps: Iterable[ScriptStep], clock: Callable[[], float] = time.monotonic,
                 logger=None):
        self._steps: List[ScriptStep] = sorted(steps, key=lambda step: step.at)
        self._clock = clock
        self._logger = logger
        self._started_at: Optional[float] = None
        self._commands: List[HostCommand] = []

    def poll(self) -> List[PointerEvent]:
        now = self._clock()
        if self._started_at is None:
            self._started_at = now

        events: List[PointerEvent] = []
        while self._steps and self._started_at + self._steps[0].at <= now:
            step = self._steps.pop(0)
            timestamp = self._started_at + step.at
            if step.command is not None:
                self._commands.append(step.command)
            if step.kind is not None:
                events.append(PointerEvent(step.kind, step.x, step.y, timestamp))

        if events and self._logger:
            self._logger.debug(f"Replayed {len(events)} scripted events")
        return events

    def drain_commands(self) -> List[HostCommand]:
        commands, self._commands = self._commands, []
        return commands

    def cleanup(self) -> None:
        self._steps.clear()
        self._commands.clear()

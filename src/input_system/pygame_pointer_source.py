"""
Pointer source backed by the pygame event queue
"""

import time
from typing import Callable, List, Optional

import pygame

from render_system import ResetControl
from .interfaces import IPointerSource
from .pointer_event import HostCommand, PointerEvent


class PygamePointerSource(IPointerSource):
    """
    Translates pygame mouse events (touch arrives as emulated mouse
    events) into PointerEvents, and keys into host commands.

    Controls:
        left button / touch   pointer down, drag, up
        reset control tap     reset (the press never reaches the canvas)
        R                     reset
        Esc / window close    quit
    """

    def __init__(self, logger, clock: Callable[[], float] = time.monotonic,
                 reset_control: Optional[ResetControl] = None):
        """
        Args:
            logger: ClassLogger instance
            clock: Session clock used to timestamp events
            reset_control: Hit area of the on-screen reset button, None for no button
        """
        self._logger = logger
        self._clock = clock
        self._reset_control = reset_control
        self._pointer_down = False
        self._control_pressed = False
        self._commands: List[HostCommand] = []

    def poll(self) -> List[PointerEvent]:
        events: List[PointerEvent] = []
        for raw in pygame.event.get():
            now = self._clock()
            if raw.type == pygame.QUIT:
                self._commands.append(HostCommand.QUIT)
            elif raw.type == pygame.KEYDOWN:
                if raw.key == pygame.K_ESCAPE:
                    self._commands.append(HostCommand.QUIT)
                elif raw.key == pygame.K_r:
                    self._commands.append(HostCommand.RESET)
            elif raw.type == pygame.MOUSEBUTTONDOWN and raw.button == 1:
                if self._reset_control is not None and self._reset_control.contains(raw.pos):
                    self._control_pressed = True
                    self._commands.append(HostCommand.RESET)
                    self._logger.debug("Reset control tapped")
                else:
                    self._pointer_down = True
                    events.append(PointerEvent.down(*raw.pos, timestamp=now))
            elif raw.type == pygame.MOUSEMOTION and self._pointer_down:
                events.append(PointerEvent.move(*raw.pos, timestamp=now))
            elif raw.type == pygame.MOUSEBUTTONUP and raw.button == 1:
                if self._control_pressed:
                    self._control_pressed = False
                elif self._pointer_down:
                    self._pointer_down = False
                    events.append(PointerEvent.up(now, *raw.pos))

        if events:
            self._logger.debug(f"Polled {len(events)} pointer events")
        return events

    def drain_commands(self) -> List[HostCommand]:
        commands, self._commands = self._commands, []
        return commands

    def cleanup(self) -> None:
        self._pointer_down = False
        self._control_pressed = False
        self._commands.clear()

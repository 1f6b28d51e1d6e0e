"""
Abstract interfaces for pointer input sources
"""

from abc import ABC, abstractmethod
from typing import List

from .pointer_event import HostCommand, PointerEvent


class IPointerSource(ABC):
    """
    Abstract interface for anything that produces pointer input.

    Implementations: pygame window (mouse and touch), scripted replay, tests.
    Only a single active pointer is modeled.
    """

    @abstractmethod
    def poll(self) -> List[PointerEvent]:
        """
        Drain pointer events received since the previous poll.

        Returns:
            Events in arrival order, timestamped with the session clock
        """
        pass

    @abstractmethod
    def drain_commands(self) -> List[HostCommand]:
        """
        Drain host commands (reset, quit) received since the previous call.

        Returns:
            Commands in arrival order
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release any resources held by the source"""
        pass

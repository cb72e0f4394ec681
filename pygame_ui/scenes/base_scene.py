"""Base scene class for the game window."""

from abc import ABC, abstractmethod
from typing import Tuple

import pygame


class BaseScene(ABC):
    """A full-window screen driven by the application loop.

    The application calls ``on_enter`` once with the window size, forwards
    every event to ``handle_event``, then calls ``update`` and ``draw`` once
    per frame. ``on_resize`` follows window size changes.
    """

    def __init__(self):
        self.size: Tuple[int, int] = (0, 0)
        self._is_active = False

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def on_enter(self, size: Tuple[int, int]) -> None:
        """Activate the scene in a window of ``size``."""
        self.size = size
        self._is_active = True

    def on_exit(self) -> None:
        self._is_active = False

    def on_resize(self, size: Tuple[int, int]) -> None:
        """Track the new window size; subclasses re-layout."""
        self.size = size

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one input event, returning True if it was consumed."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance timers and animations by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene onto ``surface``."""

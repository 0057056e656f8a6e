from abc import ABC, abstractmethod
from typing import Optional

import pygame
from pygame import Surface


class BaseWidget(ABC):
    def __init__(self, parent: Optional["BaseWidget"] = None) -> None:
        self.x = 0
        self.y = 0

        self.parent = parent

        self.visible = True
        self.focused = False
        self.disabled = False
        self.active = True

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle an event.
        Return True if event was consumed.
        """
        pass

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        pass

    def draw(self, surface: Surface) -> None:
        """Only draw if actually visible and active."""
        if not self.visible or not self.active_in_hierarchy:
            return

        self._draw(surface)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @property
    def active_in_hierarchy(self) -> bool:
        if not self.active:
            return False

        if self.parent is not None:
            return self.parent.active_in_hierarchy

        return True

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def width(self) -> int:
        return self.get_size()[0]

    @property
    def height(self) -> int:
        return self.get_size()[1]

    @abstractmethod
    def _draw(self, surface: Surface) -> None:
        pass

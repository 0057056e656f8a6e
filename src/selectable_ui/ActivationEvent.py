from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

import pygame


class InputSource(Enum):
    POINTER = "pointer"
    SUBMIT = "submit"


class PointerButton(IntEnum):
    """Mouse buttons, numbered the way pygame reports them."""
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


@dataclass(frozen=True)
class ActivationEvent:
    source: InputSource
    button: Optional[PointerButton | int] = None
    payload: Any = None

    @classmethod
    def pointer(cls, event: pygame.event.Event) -> "ActivationEvent":
        """
        Build a pointer activation from a mouse button event.

        Buttons pygame reports beyond left/middle/right (wheel, side buttons)
        are kept as plain ints.
        """
        raw = getattr(event, "button", None)
        try:
            button = PointerButton(raw)
        except ValueError:
            button = raw

        return cls(InputSource.POINTER, button, event)

    @classmethod
    def submit(cls, event: Optional[pygame.event.Event] = None) -> "ActivationEvent":
        return cls(InputSource.SUBMIT, None, event)

from .ActivationEvent import ActivationEvent, InputSource, PointerButton
from .BaseWidget import BaseWidget
from .Button import Button, SETTLE_OVERLAP, SETTLE_SUPERSEDE
from .ButtonClickedEvent import ButtonClickedEvent
from .ColorBlock import ColorBlock
from .ColorTintTransition import ColorTintTransition
from .CoroutineRunner import Coroutine, CoroutineRunner
from .Profiler import Profiler, profiler
from .Selectable import Selectable
from .SelectionState import SelectionState
from .Settings import Settings
from .Time import Time
from .VerticalLayout import VerticalLayout

__all__ = [
  "ActivationEvent",
  "BaseWidget",
  "Button",
  "ButtonClickedEvent",
  "ColorBlock",
  "ColorTintTransition",
  "Coroutine",
  "CoroutineRunner",
  "InputSource",
  "PointerButton",
  "Profiler",
  "Selectable",
  "SelectionState",
  "Settings",
  "SETTLE_OVERLAP",
  "SETTLE_SUPERSEDE",
  "Time",
  "VerticalLayout",
  "profiler",
]

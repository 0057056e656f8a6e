from enum import Enum


class SelectionState(Enum):
    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"
    PRESSED = "pressed"
    SELECTED = "selected"
    DISABLED = "disabled"

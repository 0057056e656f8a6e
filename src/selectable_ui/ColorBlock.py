from dataclasses import dataclass
from typing import Any, Dict, Tuple

from selectable_ui.colors import GREY, LIGHT_GREY, MID_GREY, DARK_GREY, CHARCOAL
from selectable_ui.helpers import scale_color
from selectable_ui.SelectionState import SelectionState

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class ColorBlock:
    """Tint per selection state plus the duration of a colour fade."""
    normal_color: Color = GREY
    highlighted_color: Color = MID_GREY
    pressed_color: Color = DARK_GREY
    selected_color: Color = LIGHT_GREY
    disabled_color: Color = CHARCOAL
    color_multiplier: float = 1.0
    fade_duration: float = 0.1

    def __post_init__(self) -> None:
        if self.fade_duration < 0:
            raise ValueError(f"fade_duration must be >= 0, got {self.fade_duration}")

        if self.color_multiplier <= 0:
            raise ValueError(f"color_multiplier must be > 0, got {self.color_multiplier}")

    def color_for(self, state: SelectionState) -> Color:
        colors = {
            SelectionState.NORMAL: self.normal_color,
            SelectionState.HIGHLIGHTED: self.highlighted_color,
            SelectionState.PRESSED: self.pressed_color,
            SelectionState.SELECTED: self.selected_color,
            SelectionState.DISABLED: self.disabled_color,
        }

        return scale_color(colors[state], self.color_multiplier)

    @classmethod
    def from_settings(cls, button: Dict[str, Any]) -> "ColorBlock":
        defaults = cls()
        colors = button.get("colors", {})

        def color(name: str, fallback: Color) -> Color:
            r, g, b = colors.get(name, fallback)
            return (int(r), int(g), int(b))

        return cls(
            normal_color=color("normal", defaults.normal_color),
            highlighted_color=color("highlighted", defaults.highlighted_color),
            pressed_color=color("pressed", defaults.pressed_color),
            selected_color=color("selected", defaults.selected_color),
            disabled_color=color("disabled", defaults.disabled_color),
            color_multiplier=float(button.get("color_multiplier", defaults.color_multiplier)),
            fade_duration=float(button.get("fade_duration", defaults.fade_duration)),
        )

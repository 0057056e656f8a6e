import logging
from typing import Any, Optional

from selectable_ui.ColorBlock import Color, ColorBlock
from selectable_ui.CoroutineRunner import Coroutine, CoroutineGenerator, CoroutineRunner
from selectable_ui.SelectionState import SelectionState
from selectable_ui.Time import Time
from selectable_ui.helpers import lerp_color


class ColorTintTransition:
    """
    Visual state machine tinting a widget per selection state.

    Animated transitions fade from the displayed colour to the target colour
    over `colors.fade_duration` seconds of unscaled time.
    """

    def __init__(
        self,
        colors: ColorBlock,
        runner: CoroutineRunner,
        time: Time,
        owner: Any
    ) -> None:
        self.colors = colors
        self.runner = runner
        self.time = time
        self.owner = owner

        self.state = SelectionState.NORMAL
        self.color: Color = colors.color_for(self.state)
        self.target_color: Color = self.color

        self._tween: Optional[Coroutine] = None

    def apply(self, state: SelectionState, animate: bool) -> None:
        self.state = state
        self.target_color = self.colors.color_for(state)
        self._stop_tween()

        if not animate or self.colors.fade_duration == 0:
            self.color = self.target_color
            return

        self._tween = self.runner.start(self.owner, self._fade(self.color, self.target_color))

    @property
    def is_fading(self) -> bool:
        return self._tween is not None and self._tween.running

    def _stop_tween(self) -> None:
        if self._tween is not None:
            self._tween.stop()
            self._tween = None

    def _fade(self, start: Color, end: Color) -> CoroutineGenerator:
        duration = self.colors.fade_duration
        elapsed = 0.0
        last_frame = self.time.frame_count

        while elapsed < duration:
            yield
            if self.time.frame_count == last_frame:
                continue

            last_frame = self.time.frame_count
            elapsed += self.time.unscaled_delta_time
            self.color = lerp_color(start, end, elapsed / duration)

        logging.debug(f"Fade to {end} finished on {self.owner!r}")

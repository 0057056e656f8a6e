import logging
from typing import Any, Callable, Dict, Iterable, Optional, Set, Tuple

import pygame
from pygame import Surface
from pygame.freetype import Font

from selectable_ui.ActivationEvent import ActivationEvent, PointerButton
from selectable_ui.BaseWidget import BaseWidget
from selectable_ui.ButtonClickedEvent import ButtonClickedEvent
from selectable_ui.ColorBlock import ColorBlock
from selectable_ui.CoroutineRunner import Coroutine, CoroutineGenerator, CoroutineRunner
from selectable_ui.Profiler import Profiler, profiler as default_profiler
from selectable_ui.Selectable import Selectable
from selectable_ui.SelectionState import SelectionState
from selectable_ui.Time import Time
from selectable_ui.colors import LIGHT_GREY, WHITE

SETTLE_OVERLAP = "overlap"
SETTLE_SUPERSEDE = "supersede"

DEFAULT_SUBMIT_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
DEFAULT_SUBMIT_BUTTONS = (0,)


class Button(Selectable):
    """
    Button activated by a left click or by "submit" from keyboard/gamepad.

    Both paths call every listener of `on_click`. A submit additionally shows
    the pressed state and, once `fade_duration` seconds of unscaled time
    have passed, settles to whatever the selection state is at that moment.
    """
    FONT_COLOR = WHITE
    FONT_COLOR_DISABLED = LIGHT_GREY

    BORDER_COLOR = LIGHT_GREY

    BORDER_WIDTH = 3
    BORDER_RADIUS = 8

    def __init__(
        self,
        label: str,
        font: Font,
        runner: CoroutineRunner,
        time: Time,
        callback: Optional[Callable[[], None]] = None,
        colors: Optional[ColorBlock] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        submit_keys: Iterable[int] = DEFAULT_SUBMIT_KEYS,
        submit_buttons: Iterable[int] = DEFAULT_SUBMIT_BUTTONS,
        settle_policy: str = SETTLE_OVERLAP,
        profiler: Optional[Profiler] = None,
        parent: Optional[BaseWidget] = None
    ) -> None:
        if settle_policy not in (SETTLE_OVERLAP, SETTLE_SUPERSEDE):
            raise ValueError(f"Unknown settle policy: {settle_policy}")

        self.label = label
        self.font = font

        _, temp_rect = self.font.render(self.label)

        vertical_padding = int(font.size / 100 * 40)
        horizontal_padding = int(font.size)

        calculated_height = int(font.size) + vertical_padding * 2
        calculated_width = temp_rect.width + horizontal_padding * 2

        if width:
            calculated_width = width

        if height:
            calculated_height = height

        super().__init__(runner, time, colors, calculated_width, calculated_height, parent)

        self.on_click = ButtonClickedEvent()
        if callback is not None:
            self.on_click.add_listener(callback)

        self.submit_keys = set(submit_keys)
        self.submit_buttons = set(submit_buttons)
        self.settle_policy = settle_policy
        self.profiler = profiler or default_profiler

        self._pointer_buttons: Set[int] = set()
        self._settle: Optional[Coroutine] = None

        self.label_surfaces: Dict[bool, Tuple[Surface, pygame.Rect]] = {
            True: self.font.render(self.label, self.FONT_COLOR),
            False: self.font.render(self.label, self.FONT_COLOR_DISABLED),
        }

    @classmethod
    def from_settings(
        cls,
        label: str,
        font: Font,
        runner: CoroutineRunner,
        time: Time,
        button: Dict[str, Any],
        callback: Optional[Callable[[], None]] = None,
        **kwargs: Any
    ) -> "Button":
        return cls(
            label,
            font,
            runner,
            time,
            callback=callback,
            colors=ColorBlock.from_settings(button),
            submit_keys=button.get("submit_keys", DEFAULT_SUBMIT_KEYS),
            submit_buttons=button.get("submit_buttons", DEFAULT_SUBMIT_BUTTONS),
            settle_policy=button.get("settle_policy", SETTLE_OVERLAP),
            **kwargs
        )

    def press(self) -> None:
        if not self.is_active() or not self.is_interactable():
            return

        self.profiler.add_marker("Button.on_click", self)
        self.on_click.invoke()

    def on_pointer_click(self, event: ActivationEvent) -> None:
        if event.button != PointerButton.LEFT:
            return

        self.press()

    def on_submit(self, event: ActivationEvent) -> None:
        self.press()

        # A listener may have disabled or deactivated the button
        if not self.is_active() or not self.is_interactable():
            return

        self.do_state_transition(SelectionState.PRESSED, False)

        if self.settle_policy == SETTLE_SUPERSEDE and self._settle is not None:
            self._settle.stop()

        self._settle = self.start_coroutine(self._on_finish_submit())

    @property
    def settle_pending(self) -> bool:
        return self._settle is not None and self._settle.running

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.is_active() or not self.is_interactable():
            self._pointer_buttons.clear()
            return False

        if event.type == pygame.MOUSEBUTTONDOWN:
            consumed = super().handle_event(event)
            if self.rect.collidepoint(event.pos):
                self._pointer_buttons.add(event.button)
                consumed = True

            return consumed

        elif event.type == pygame.MOUSEBUTTONUP:
            consumed = super().handle_event(event)
            if event.button in self._pointer_buttons:
                self._pointer_buttons.discard(event.button)
                if self.rect.collidepoint(event.pos):
                    self.on_pointer_click(ActivationEvent.pointer(event))
                consumed = True

            return consumed

        elif event.type == pygame.KEYDOWN:
            if self.has_selection and event.key in self.submit_keys:
                self.on_submit(ActivationEvent.submit(event))
                return True

            return False

        elif event.type == pygame.JOYBUTTONDOWN:
            if self.has_selection and event.button in self.submit_buttons:
                self.on_submit(ActivationEvent.submit(event))
                return True

            return False

        return super().handle_event(event)

    def set_active(self, active: bool) -> None:
        if not active:
            self._pointer_buttons.clear()

        super().set_active(active)

    def _on_finish_submit(self) -> CoroutineGenerator:
        fade_time = self.colors.fade_duration
        elapsed = 0.0
        last_frame = self.time.frame_count

        while elapsed < fade_time:
            yield

            if not self.is_active() or not self.is_interactable():
                logging.debug(f"Settle of {self!r} cancelled")
                return

            # Only frames ticked after the submit count towards the wait
            if self.time.frame_count == last_frame:
                continue

            last_frame = self.time.frame_count
            elapsed += self.time.unscaled_delta_time

        self.do_state_transition(self.current_selection_state, False)

    def _draw(self, surface: Surface) -> None:
        pygame.draw.rect(
            surface,
            self.transition.color,
            self.rect,
            border_radius=self.BORDER_RADIUS
        )
        pygame.draw.rect(
            surface,
            self.BORDER_COLOR,
            self.rect,
            width=self.BORDER_WIDTH,
            border_radius=self.BORDER_RADIUS
        )

        label_surface, label_rect = self.label_surfaces[self.is_interactable()]
        label_rect = label_rect.copy()
        label_rect.center = self.rect.center
        surface.blit(label_surface, label_rect)

    def __repr__(self) -> str:
        return f"Button({self.label!r})"

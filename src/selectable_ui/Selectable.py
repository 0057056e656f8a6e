import logging
from typing import Optional

import pygame
from pygame import Rect

from selectable_ui.BaseWidget import BaseWidget
from selectable_ui.ColorBlock import ColorBlock
from selectable_ui.ColorTintTransition import ColorTintTransition
from selectable_ui.CoroutineRunner import Coroutine, CoroutineGenerator, CoroutineRunner
from selectable_ui.SelectionState import SelectionState
from selectable_ui.Time import Time


class Selectable(BaseWidget):
    """
    Interactable widget with a live selection state.

    Pointer and selection flags are combined into `current_selection_state`
    every time it is read. Visual changes go through `do_state_transition`,
    which hands them to the colour transition.
    """

    def __init__(
        self,
        runner: CoroutineRunner,
        time: Time,
        colors: Optional[ColorBlock] = None,
        width: int = 0,
        height: int = 0,
        parent: Optional[BaseWidget] = None
    ) -> None:
        super().__init__(parent)

        self.runner = runner
        self.time = time
        self.colors = colors or ColorBlock()
        self.rect = Rect(0, 0, width, height)

        self.destroyed = False

        self.is_pointer_inside = False
        self.is_pointer_down = False
        self.has_selection = False

        self.transition = ColorTintTransition(self.colors, runner, time, self)
        self.transition.apply(self.current_selection_state, False)

    def is_active(self) -> bool:
        return not self.destroyed and self.active_in_hierarchy

    def is_interactable(self) -> bool:
        return not self.disabled

    @property
    def interactable(self) -> bool:
        return not self.disabled

    @interactable.setter
    def interactable(self, value: bool) -> None:
        if value == self.interactable:
            return

        self.disabled = not value
        if self.disabled:
            self.has_selection = False
            self.is_pointer_down = False

        self._evaluate_and_transition(animate=True)

    def disable(self) -> None:
        self.interactable = False

    def enable(self) -> None:
        self.interactable = True

    @property
    def current_selection_state(self) -> SelectionState:
        if not self.is_interactable():
            return SelectionState.DISABLED

        if self.is_pointer_down:
            return SelectionState.PRESSED

        if self.has_selection:
            return SelectionState.SELECTED

        if self.is_pointer_inside:
            return SelectionState.HIGHLIGHTED

        return SelectionState.NORMAL

    def get_size(self) -> tuple[int, int]:
        return self.rect.width, self.rect.height

    def set_position(self, x: int, y: int) -> None:
        super().set_position(x, y)
        self.rect.topleft = (x, y)

    def set_active(self, active: bool) -> None:
        if active == self.active:
            return

        self.active = active
        if active:
            self._evaluate_and_transition(animate=False)
        else:
            self.stop_all_coroutines()
            self._instant_clear_state()

    def destroy(self) -> None:
        if self.destroyed:
            return

        self.stop_all_coroutines()
        self.destroyed = True
        logging.debug(f"Destroyed {self!r}")

    def select(self) -> bool:
        if not self.is_active() or not self.is_interactable():
            return False

        if not self.has_selection:
            self.has_selection = True
            self._evaluate_and_transition(animate=True)

        return True

    def deselect(self) -> None:
        if self.has_selection:
            self.has_selection = False
            self._evaluate_and_transition(animate=True)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.is_active() or not self.is_interactable():
            return False

        if event.type == pygame.MOUSEMOTION:
            inside = self.rect.collidepoint(event.pos)
            if inside != self.is_pointer_inside:
                self.is_pointer_inside = inside
                self._evaluate_and_transition(animate=True)

            return inside

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.is_pointer_inside = True
                self.is_pointer_down = True
                self.has_selection = True
                self._evaluate_and_transition(animate=True)

                return True

            return False

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_down = self.is_pointer_down
            if was_down:
                self.is_pointer_down = False
                self._evaluate_and_transition(animate=True)

            return was_down

        return False

    def do_state_transition(self, state: SelectionState, animate: bool) -> None:
        if not self.active_in_hierarchy:
            return

        logging.debug(f"{self!r} -> {state.name} (animate={animate})")
        self.transition.apply(state, animate)

    def start_coroutine(self, generator: CoroutineGenerator) -> Coroutine:
        return self.runner.start(self, generator)

    def stop_all_coroutines(self) -> None:
        self.runner.stop_all(self)

    def _evaluate_and_transition(self, animate: bool) -> None:
        if not self.is_active():
            return

        self.do_state_transition(self.current_selection_state, animate)

    def _instant_clear_state(self) -> None:
        self.is_pointer_inside = False
        self.is_pointer_down = False
        self.has_selection = False

        self.transition.apply(SelectionState.NORMAL, False)

from typing import List, Optional

import pygame
from pygame import Surface

from selectable_ui.BaseWidget import BaseWidget
from selectable_ui.Selectable import Selectable


class VerticalLayout(BaseWidget):
    """Stacks child widgets vertically and owns their active state."""

    def __init__(
        self,
        padding_x: int = 20,
        element_padding: int = 10,
        parent: Optional[BaseWidget] = None
    ) -> None:
        super().__init__(parent)

        self.padding_x = padding_x
        self.element_padding = element_padding
        self.widgets: List[BaseWidget] = []

    def add(self, widget: BaseWidget) -> None:
        widget.parent = self
        self.widgets.append(widget)
        self._layout()

    def set_position(self, x: int, y: int) -> None:
        super().set_position(x, y)
        self._layout()

    def set_active(self, active: bool) -> None:
        self.active = active

    def get_size(self) -> tuple[int, int]:
        if not self.widgets:
            return 0, 0

        width = max(widget.width for widget in self.widgets) + self.padding_x * 2
        height = sum(widget.height for widget in self.widgets)
        height += self.element_padding * (len(self.widgets) - 1)

        return width, height

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.active_in_hierarchy:
            return False

        consumed = False
        for widget in self.widgets:
            if widget.handle_event(event):
                consumed = True

                # Clicking a widget moves the selection to it
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 \
                        and isinstance(widget, Selectable):
                    self._deselect_others(widget)

        return consumed

    def _deselect_others(self, keep: Selectable) -> None:
        for widget in self.widgets:
            if widget is not keep and isinstance(widget, Selectable):
                widget.deselect()

    def select_next(self) -> Optional[Selectable]:
        """Move the selection to the next selectable child, wrapping around."""
        selectables = [
            w for w in self.widgets
            if isinstance(w, Selectable) and w.is_active() and w.is_interactable()
        ]
        if not selectables:
            return None

        current = next((i for i, w in enumerate(selectables) if w.has_selection), -1)
        for widget in selectables:
            widget.deselect()

        selected = selectables[(current + 1) % len(selectables)]
        selected.select()

        return selected

    def _layout(self) -> None:
        y = self.y
        for widget in self.widgets:
            widget.set_position(self.x + self.padding_x, y)
            y += widget.height + self.element_padding

    def _draw(self, surface: Surface) -> None:
        for widget in self.widgets:
            widget.draw(surface)

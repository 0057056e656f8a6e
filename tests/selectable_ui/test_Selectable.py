"""Tests for Selectable."""
import os
import unittest

# Set SDL to use dummy video driver
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import pygame

from selectable_ui.ColorBlock import ColorBlock
from selectable_ui.CoroutineRunner import CoroutineRunner
from selectable_ui.Selectable import Selectable
from selectable_ui.SelectionState import SelectionState
from selectable_ui.Time import Time
from selectable_ui.VerticalLayout import VerticalLayout


class ConcreteSelectable(Selectable):
    """Concrete implementation for testing Selectable."""

    def _draw(self, surface: pygame.Surface) -> None:
        pass


class TestSelectable(unittest.TestCase):
    """Test Selectable state handling."""

    @classmethod
    def setUpClass(cls):
        pygame.init()

    def setUp(self):
        self.now = 0.0
        self.time = Time(time_source=lambda: self.now)
        self.time.tick()
        self.runner = CoroutineRunner()
        self.widget = ConcreteSelectable(
            self.runner,
            self.time,
            ColorBlock(fade_duration=0.2),
            width=100,
            height=40
        )
        self.widget.set_position(10, 10)

    def test_initial_state(self):
        """Test widget starts active, interactable and normal."""
        assert self.widget.is_active() is True
        assert self.widget.is_interactable() is True
        assert self.widget.current_selection_state == SelectionState.NORMAL
        assert self.widget.transition.state == SelectionState.NORMAL

    def test_state_precedence(self):
        """Test disabled > pressed > selected > highlighted > normal."""
        self.widget.is_pointer_inside = True
        assert self.widget.current_selection_state == SelectionState.HIGHLIGHTED

        self.widget.has_selection = True
        assert self.widget.current_selection_state == SelectionState.SELECTED

        self.widget.is_pointer_down = True
        assert self.widget.current_selection_state == SelectionState.PRESSED

        self.widget.disabled = True
        assert self.widget.current_selection_state == SelectionState.DISABLED

    def test_gate_is_recomputed(self):
        """Test flags changed directly are seen on the next check."""
        self.widget.disabled = True
        assert self.widget.is_interactable() is False

        self.widget.disabled = False
        self.widget.active = False
        assert self.widget.is_active() is False

    def test_disable_clears_selection(self):
        self.widget.select()
        self.widget.interactable = False

        assert self.widget.has_selection is False
        assert self.widget.transition.state == SelectionState.DISABLED

        self.widget.enable()
        assert self.widget.transition.state == SelectionState.NORMAL

    def test_select_refused_when_disabled_or_inactive(self):
        self.widget.disable()
        assert self.widget.select() is False

        self.widget.enable()
        self.widget.set_active(False)
        assert self.widget.select() is False
        assert self.widget.has_selection is False

    def test_select_and_deselect(self):
        assert self.widget.select() is True
        assert self.widget.transition.state == SelectionState.SELECTED

        self.widget.deselect()
        assert self.widget.transition.state == SelectionState.NORMAL

    def test_set_active_false_stops_coroutines_and_clears(self):
        self.widget.select()
        self.widget.is_pointer_inside = True
        assert self.runner.count(self.widget) == 1

        self.widget.set_active(False)

        assert self.runner.count(self.widget) == 0
        assert self.widget.has_selection is False
        assert self.widget.is_pointer_inside is False
        assert self.widget.transition.state == SelectionState.NORMAL
        assert self.widget.transition.color == self.widget.colors.normal_color

    def test_set_active_true_snaps_to_current_state(self):
        self.widget.set_active(False)
        self.widget.disabled = True

        self.widget.set_active(True)

        assert self.widget.transition.state == SelectionState.DISABLED
        assert self.widget.transition.color == self.widget.colors.disabled_color
        assert self.runner.count(self.widget) == 0

    def test_destroy(self):
        self.widget.select()
        self.widget.destroy()

        assert self.widget.destroyed is True
        assert self.widget.is_active() is False
        assert self.runner.count(self.widget) == 0

    def test_inactive_parent(self):
        layout = VerticalLayout()
        layout.add(self.widget)

        layout.set_active(False)
        assert self.widget.is_active() is False

        layout.set_active(True)
        assert self.widget.is_active() is True

    def test_do_state_transition_skipped_when_inactive(self):
        self.widget.set_active(False)
        self.widget.do_state_transition(SelectionState.PRESSED, False)

        assert self.widget.transition.state == SelectionState.NORMAL

    def test_pointer_enter_and_exit(self):
        enter = pygame.event.Event(pygame.MOUSEMOTION, {'pos': (20, 20)})
        leave = pygame.event.Event(pygame.MOUSEMOTION, {'pos': (500, 500)})

        assert self.widget.handle_event(enter) is True
        assert self.widget.current_selection_state == SelectionState.HIGHLIGHTED

        assert self.widget.handle_event(leave) is False
        assert self.widget.current_selection_state == SelectionState.NORMAL

    def test_pointer_down_selects(self):
        down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, {'pos': (20, 20), 'button': 1})
        up = pygame.event.Event(pygame.MOUSEBUTTONUP, {'pos': (20, 20), 'button': 1})

        assert self.widget.handle_event(down) is True
        assert self.widget.current_selection_state == SelectionState.PRESSED

        assert self.widget.handle_event(up) is True
        assert self.widget.current_selection_state == SelectionState.SELECTED

    def test_events_ignored_when_disabled(self):
        self.widget.disable()
        down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, {'pos': (20, 20), 'button': 1})

        assert self.widget.handle_event(down) is False
        assert self.widget.is_pointer_down is False

    def test_animated_transition_fades_with_unscaled_time(self):
        self.time.time_scale = 0.0
        self.widget.select()
        selected = self.widget.colors.selected_color

        assert self.widget.transition.is_fading is True
        assert self.widget.transition.color != selected

        self.now = 0.25
        self.time.tick()
        self.runner.tick()

        assert self.widget.transition.color == selected
        assert self.widget.transition.is_fading is False


if __name__ == '__main__':
    unittest.main()

"""Tests for ColorTintTransition - colour per selection state with fades."""
from selectable_ui.ColorBlock import ColorBlock
from selectable_ui.ColorTintTransition import ColorTintTransition
from selectable_ui.CoroutineRunner import CoroutineRunner
from selectable_ui.SelectionState import SelectionState
from selectable_ui.Time import Time


class Owner:
    destroyed = False


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def create(fade_duration=0.2):
    clock = FakeClock()
    time = Time(time_source=clock)
    time.tick()
    runner = CoroutineRunner()
    colors = ColorBlock(
        normal_color=(100, 100, 100),
        pressed_color=(0, 0, 0),
        fade_duration=fade_duration
    )
    owner = Owner()

    return ColorTintTransition(colors, runner, time, owner), clock, time, runner


class TestApply:
    def test_starts_normal(self):
        transition, *_ = create()

        assert transition.state == SelectionState.NORMAL
        assert transition.color == (100, 100, 100)

    def test_instant_apply_snaps(self):
        transition, _, _, runner = create()

        transition.apply(SelectionState.PRESSED, False)

        assert transition.state == SelectionState.PRESSED
        assert transition.color == (0, 0, 0)
        assert runner.count() == 0

    def test_animated_apply_with_zero_fade_snaps(self):
        transition, _, _, runner = create(fade_duration=0)

        transition.apply(SelectionState.PRESSED, True)

        assert transition.color == (0, 0, 0)
        assert runner.count() == 0

    def test_animated_apply_fades(self):
        transition, clock, time, runner = create()

        transition.apply(SelectionState.PRESSED, True)
        assert transition.color == (100, 100, 100)
        assert transition.is_fading is True

        clock.now = 0.1
        time.tick()
        runner.tick()
        assert transition.color == (50, 50, 50)

        clock.now = 0.2
        time.tick()
        runner.tick()
        clock.now = 0.3
        time.tick()
        runner.tick()
        assert transition.color == (0, 0, 0)
        assert transition.is_fading is False

    def test_fade_ignores_time_scale(self):
        transition, clock, time, runner = create()
        time.time_scale = 0.0

        transition.apply(SelectionState.PRESSED, True)
        clock.now = 0.25
        time.tick()
        runner.tick()

        assert transition.color == (0, 0, 0)

    def test_instant_apply_stops_running_fade(self):
        transition, clock, time, runner = create()

        transition.apply(SelectionState.PRESSED, True)
        transition.apply(SelectionState.NORMAL, False)

        assert runner.count() == 0
        assert transition.color == (100, 100, 100)

        clock.now = 0.1
        time.tick()
        runner.tick()
        assert transition.color == (100, 100, 100)

    def test_new_fade_starts_from_displayed_color(self):
        transition, clock, time, runner = create()

        transition.apply(SelectionState.PRESSED, True)
        clock.now = 0.1
        time.tick()
        runner.tick()

        transition.apply(SelectionState.NORMAL, True)
        assert runner.count() == 1
        assert transition.color == (50, 50, 50)
        assert transition.target_color == (100, 100, 100)

    def test_fade_started_mid_frame_waits_for_next_frame(self):
        transition, clock, time, runner = create()

        # Clock tick, then the state change, then the runner in the same frame
        clock.now = 0.25
        time.tick()
        transition.apply(SelectionState.PRESSED, True)
        runner.tick()
        assert transition.color == (100, 100, 100)
        assert transition.is_fading is True

        clock.now = 0.35
        time.tick()
        runner.tick()
        assert transition.color == (50, 50, 50)

    def test_fade_ignores_extra_runner_ticks_in_one_frame(self):
        transition, clock, time, runner = create()

        transition.apply(SelectionState.PRESSED, True)
        clock.now = 0.1
        time.tick()
        runner.tick()
        runner.tick()

        assert transition.color == (50, 50, 50)

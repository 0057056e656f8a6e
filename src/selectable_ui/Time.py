"""Per-frame clock with scaled and unscaled deltas."""
import time
from typing import Callable, Optional


class Time:
    """
    Frame clock driven by the host loop.

    `tick()` is called once per frame. Unscaled values follow real elapsed
    time and ignore `time_scale`, so UI fades keep running while the rest of
    the application is paused.
    """

    def __init__(
        self,
        time_source: Optional[Callable[[], float]] = None,
        time_scale: float = 1.0,
        max_delta_time: float = 0.25
    ) -> None:
        """
        Args:
            time_source: Returns the current time in seconds, defaults to
                `time.monotonic`
            time_scale: Multiplier applied to `delta_time`, 0 pauses
            max_delta_time: Upper bound for a single frame's delta
        """
        if max_delta_time <= 0:
            raise ValueError(f"max_delta_time must be > 0, got {max_delta_time}")

        self._time_source = time_source or time.monotonic
        self._time_scale = 1.0
        self.time_scale = time_scale
        self.max_delta_time = max_delta_time

        self._last: Optional[float] = None

        self.frame_count = 0
        self.unscaled_delta_time = 0.0
        self.delta_time = 0.0
        self.unscaled_time = 0.0
        self.time = 0.0

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"time_scale must be >= 0, got {value}")

        self._time_scale = value

    def tick(self) -> float:
        """Advance one frame and return the unscaled delta."""
        now = self._time_source()

        if self._last is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last), self.max_delta_time)

        self._last = now

        self.frame_count += 1
        self.unscaled_delta_time = delta
        self.delta_time = delta * self._time_scale
        self.unscaled_time += self.unscaled_delta_time
        self.time += self.delta_time

        return delta

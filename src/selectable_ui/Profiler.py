from collections import Counter
import logging
from typing import Any


class Profiler:
    """Counts named markers emitted by widgets, e.g. on every click."""

    def __init__(self) -> None:
        self.markers: Counter[str] = Counter()

    def add_marker(self, name: str, source: Any) -> None:
        logging.debug(f"Marker {name} from {source!r}")
        self.markers[name] += 1

    def reset(self) -> None:
        self.markers.clear()


profiler = Profiler()

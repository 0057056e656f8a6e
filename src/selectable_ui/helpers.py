from typing import Tuple


def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def scale_color(color: Tuple[int, int, int], multiplier: float) -> Tuple[int, int, int]:
    r, g, b = (int(clamp(round(channel * multiplier), 0, 255)) for channel in color)

    return (r, g, b)


def lerp_color(
    start: Tuple[int, int, int],
    end: Tuple[int, int, int],
    t: float
) -> Tuple[int, int, int]:
    t = clamp(t, 0.0, 1.0)
    r, g, b = (int(round(s + (e - s) * t)) for s, e in zip(start, end))

    return (r, g, b)

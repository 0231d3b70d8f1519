from __future__ import annotations

from typing import Callable

Writer = Callable[[str], None]


def format_value(value: float) -> str:
    """Render a number the way the console output shows it (6 significant digits)."""
    return f"{value:g}"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into [low, high]. NaN clamps to *low*."""
    if not value >= low:
        return low
    if value > high:
        return high
    return value

"""Fixed-timestep clock."""

from __future__ import annotations


class Clock:
    """Counts ticks of a fixed *dt*.

    Elapsed time is always ``tick_number * dt`` so it never drifts the way
    repeatedly adding 0.1 to a float does.
    """

    def __init__(self, dt: float) -> None:
        self._dt = dt
        self._tick_number = 0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._tick_number * self._dt

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number

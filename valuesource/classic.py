from __future__ import annotations

from valuesource._types import Writer, format_value

CLASSIC_LABEL = "Classic object"


class ClassicMovingObject:
    """A moving object that owns its own state and stepping logic.

    This is how most simulations write it: construct with initial state,
    advance by a time step, display whenever. Kept as the baseline the
    value-source objects are compared against.
    """

    def __init__(self, start: float, velocity: float, out: Writer = print) -> None:
        self._position = start
        self._velocity = velocity
        self._out = out

    @property
    def position(self) -> float:
        return self._position

    @property
    def velocity(self) -> float:
        return self._velocity

    def current_value(self) -> float:
        return self._position

    def advance(self, delta_time: float) -> None:
        self._position += self._velocity * delta_time

    def render(self) -> str:
        line = f"{CLASSIC_LABEL} position: {format_value(self._position)}"
        self._out(line)
        return line

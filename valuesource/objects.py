from __future__ import annotations

from valuesource._types import Writer, format_value
from valuesource.source import DynamicValueSource, ValueSource

VALUE_SOURCE_LABEL = "Value-source object"
REACTIVE_LABEL = "Reactive programming object"


class MovingObject:
    """A one-axis object whose position is fed by a dynamic value source.

    The world calls ``advance`` and then ``render`` like any update/present
    loop, but the object stores no position of its own. Whatever source is
    attached does the moving, so a linear accumulator can be swapped for a
    spring, a spline or a script without touching this class.

    The object never owns its source; the caller keeps it alive.
    """

    label = VALUE_SOURCE_LABEL

    def __init__(self, out: Writer = print) -> None:
        self._position: DynamicValueSource[float] | None = None
        self._out = out

    @property
    def position_source(self) -> DynamicValueSource[float] | None:
        return self._position

    @property
    def position(self) -> float | None:
        if self._position is None:
            return None
        return self._position.current_value()

    def attach_position_source(self, source: DynamicValueSource[float] | None) -> None:
        """Replace the attached source. Pass None to detach."""
        self._position = source

    def advance(self, delta_time: float) -> None:
        if self._position is not None:
            self._position.advance(delta_time)

    def render(self) -> str | None:
        """Write the current position. Returns the line, or None when detached."""
        if self._position is None:
            return None
        line = f"{self.label} position: {format_value(self._position.current_value())}"
        self._out(line)
        return line


class ReactiveMovingObject:
    """A one-axis object fed by a plain value source. Note the lack of advance().

    Time is driven outside the object, through the source's own controls,
    which is what makes rewinding possible.
    """

    label = REACTIVE_LABEL

    def __init__(self, out: Writer = print) -> None:
        self._position: ValueSource[float] | None = None
        self._out = out

    @property
    def position_source(self) -> ValueSource[float] | None:
        return self._position

    @property
    def position(self) -> float | None:
        if self._position is None:
            return None
        return self._position.current_value()

    def attach_position_source(self, source: ValueSource[float] | None) -> None:
        self._position = source

    def render(self) -> str | None:
        if self._position is None:
            return None
        line = f"{self.label} position: {format_value(self._position.current_value())}"
        self._out(line)
        return line

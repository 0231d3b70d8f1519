"""Value source capabilities.

Instead of coding to a stored float, consumers code to an interface: they
ask an intermediate object for the value, so the thing producing it can
vary. An object's position might come from static coordinates, a loop path,
a seek behaviour, or replicated state, and the consumer never knows.
"""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ValueSource(Protocol[T_co]):
    """Produces a value on demand."""

    def current_value(self) -> T_co:
        """Return the current value. Must not change any state."""
        ...


@runtime_checkable
class DynamicValueSource(ValueSource[T_co], Protocol[T_co]):
    """A value source that can also step its own state forward in time.

    ``advance`` may legitimately do nothing (see ``ConstantSource``).
    """

    def advance(self, delta_time: float) -> None:
        """Move internal state forward by ``delta_time`` seconds."""
        ...


class ConstantSource(Generic[T]):
    """A dynamic source whose value never changes."""

    def __init__(self, value: T) -> None:
        self._value = value

    def current_value(self) -> T:
        return self._value

    def advance(self, delta_time: float) -> None:
        pass

    def __repr__(self) -> str:
        return f"ConstantSource({self._value!r})"

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from valuesource.clock import Clock


class StopCondition(ABC):
    """Base class for conditions that end the demo loop."""

    @abstractmethod
    def is_met(self, clock: Clock) -> bool: ...

    @abstractmethod
    def describe(self) -> str: ...


class _TimeStop(StopCondition):
    def __init__(self, seconds: float) -> None:
        self.seconds = seconds

    def is_met(self, clock: Clock) -> bool:
        elapsed = clock.elapsed
        return elapsed > self.seconds or math.isclose(
            elapsed, self.seconds, rel_tol=1e-9, abs_tol=1e-12
        )

    def describe(self) -> str:
        return f"time({self.seconds})"


class _TickStop(StopCondition):
    def __init__(self, ticks: int) -> None:
        self.ticks = ticks

    def is_met(self, clock: Clock) -> bool:
        return clock.tick_number >= self.ticks

    def describe(self) -> str:
        return f"ticks({self.ticks})"


class _AnyStop(StopCondition):
    def __init__(self, conditions: list[StopCondition]) -> None:
        self.conditions = conditions

    def is_met(self, clock: Clock) -> bool:
        return any(c.is_met(clock) for c in self.conditions)

    def describe(self) -> str:
        return " OR ".join(c.describe() for c in self.conditions)


class _AllStop(StopCondition):
    def __init__(self, conditions: list[StopCondition]) -> None:
        self.conditions = conditions

    def is_met(self, clock: Clock) -> bool:
        return all(c.is_met(clock) for c in self.conditions)

    def describe(self) -> str:
        return " AND ".join(c.describe() for c in self.conditions)


class Stop:
    """Factory for built-in stop conditions."""

    @staticmethod
    def time(seconds: float) -> StopCondition:
        return _TimeStop(seconds)

    @staticmethod
    def ticks(n: int) -> StopCondition:
        return _TickStop(n)

    @staticmethod
    def any(*conditions: StopCondition) -> StopCondition:
        return _AnyStop(list(conditions))

    @staticmethod
    def all(*conditions: StopCondition) -> StopCondition:
        return _AllStop(list(conditions))

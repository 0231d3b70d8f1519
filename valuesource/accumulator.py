from __future__ import annotations


class LinearAccumulator:
    """Integrates a constant rate over the time deltas it is advanced by."""

    def __init__(self, start: float, rate: float) -> None:
        self._value = start
        self._rate = rate

    @property
    def rate(self) -> float:
        return self._rate

    def current_value(self) -> float:
        return self._value

    def advance(self, delta_time: float) -> None:
        # Negative deltas run the integration backwards.
        self._value += self._rate * delta_time

    def __repr__(self) -> str:
        return f"LinearAccumulator(value={self._value}, rate={self._rate})"

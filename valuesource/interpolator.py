from __future__ import annotations

from valuesource._types import clamp


class LinearInterpolator:
    """Blends linearly between *minimum* and *maximum* by a fraction in [0, 1].

    Time here is whatever fraction the caller supplies, so the source can be
    rewound or scrubbed back and forth freely.
    """

    def __init__(self, minimum: float, maximum: float) -> None:
        self._min = minimum
        self._max = maximum
        self._fraction = 0.0
        self._value = minimum

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    @property
    def fraction(self) -> float:
        return self._fraction

    def current_value(self) -> float:
        return self._value

    def set_fraction(self, t: float) -> None:
        """Set the blend fraction; values outside [0, 1] are clamped."""
        self._fraction = clamp(t, 0.0, 1.0)
        self._value = self._min + (self._max - self._min) * self._fraction

    def __repr__(self) -> str:
        return (
            f"LinearInterpolator(min={self._min}, max={self._max}, "
            f"fraction={self._fraction})"
        )

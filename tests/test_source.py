"""Tests for source module."""
import pytest

from valuesource.source import ConstantSource, DynamicValueSource, ValueSource


class OnlyQuery:
    def current_value(self) -> float:
        return 7.0


class Stepper:
    def __init__(self):
        self.t = 0.0

    def current_value(self) -> float:
        return self.t

    def advance(self, delta_time: float) -> None:
        self.t += delta_time


def test_structural_value_source():
    assert isinstance(OnlyQuery(), ValueSource)
    assert not isinstance(OnlyQuery(), DynamicValueSource)


def test_dynamic_source_is_also_a_value_source():
    s = Stepper()
    assert isinstance(s, DynamicValueSource)
    assert isinstance(s, ValueSource)


def test_unrelated_object_is_not_a_source():
    assert not isinstance(object(), ValueSource)
    assert not isinstance(3.0, ValueSource)


def test_constant_source_never_moves():
    src = ConstantSource(2.5)
    for dt in (0.1, 10.0, -4.0, 0.0):
        src.advance(dt)
        assert src.current_value() == 2.5


def test_constant_source_is_dynamic():
    assert isinstance(ConstantSource(0.0), DynamicValueSource)


def test_constant_source_holds_any_type():
    src = ConstantSource("idle")
    assert src.current_value() == "idle"
    assert repr(src) == "ConstantSource('idle')"

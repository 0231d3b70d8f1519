"""Tests for simulation module."""
import pytest

from valuesource.config import DemoConfig
from valuesource.simulation import Simulation
from valuesource.source import ConstantSource
from valuesource.stop import Stop

EXPECTED_VALUES = ["1.4", "1.8", "2.2", "2.6", "3", "3.4", "3.8", "4.2", "4.6", "5"]
EXPECTED_TIMES = ["0.1", "0.2", "0.3", "0.4", "0.5", "0.6", "0.7", "0.8", "0.9", "1"]


def _expected_default_output() -> list[str]:
    lines = []
    for t, v in zip(EXPECTED_TIMES, EXPECTED_VALUES):
        lines.append(f"Tick at {t}")
        lines.append(f"Classic object position: {v}")
        lines.append(f"Value-source object position: {v}")
        lines.append(f"Reactive programming object position: {v}")
    return lines


def test_default_run_has_ten_ticks():
    lines: list[str] = []
    report = Simulation(out=lines.append).run()

    assert report.tick_count == 10
    assert report.outcome == "Stop condition met"
    assert report.total_time == pytest.approx(1.0)
    assert [e.tick for e in report.ticks] == list(range(1, 11))


def test_default_run_output_is_exact():
    lines: list[str] = []
    Simulation(out=lines.append).run()
    assert lines == _expected_default_output()


def test_default_run_is_reproducible():
    first: list[str] = []
    second: list[str] = []
    Simulation(out=first.append).run()
    Simulation(out=second.append).run()
    assert first == second


def test_all_three_objects_end_at_five():
    report = Simulation(out=lambda line: None).run()
    assert report.labels == [
        "Classic object",
        "Value-source object",
        "Reactive programming object",
    ]
    for label in report.labels:
        assert report.final_value(label) == pytest.approx(5.0)
        assert report.initial_values[label] == 1.0


def test_no_tick_headers():
    lines: list[str] = []
    Simulation(config=DemoConfig(show_ticks=False), out=lines.append).run()
    assert len(lines) == 30
    assert not any(line.startswith("Tick at") for line in lines)


def test_step_returns_positions():
    sim = Simulation(out=lambda line: None)
    positions = sim.step()
    assert sim.clock.tick_number == 1
    assert sim.time == pytest.approx(0.1)
    assert positions["Classic object"] == pytest.approx(1.4)
    assert positions["Value-source object"] == pytest.approx(1.4)
    assert positions["Reactive programming object"] == pytest.approx(1.4)
    assert sim.lerp.fraction == pytest.approx(0.1)


def test_zero_duration_runs_no_ticks():
    lines: list[str] = []
    report = Simulation(config=DemoConfig(duration=0.0), out=lines.append).run()
    assert report.tick_count == 0
    assert lines == []
    assert report.final_values == {}


def test_uneven_timestep_overshoots_to_cover_duration():
    report = Simulation(
        config=DemoConfig(timestep=0.3), out=lambda line: None
    ).run()
    assert report.tick_count == 4
    assert report.total_time == pytest.approx(1.2)
    # Fraction clamps at 1.0 on the overshooting tick.
    assert report.final_value("Reactive programming object") == 5.0


def test_custom_stop_condition():
    sim = Simulation(out=lambda line: None, stop=Stop.ticks(3))
    report = sim.run()
    assert report.tick_count == 3
    assert report.stop_description == "ticks(3)"


def test_swap_source_mid_run():
    lines: list[str] = []
    sim = Simulation(out=lines.append)
    sim.step()
    sim.swap_position_source(ConstantSource(-1.0))
    lines.clear()
    sim.step()
    assert "Value-source object position: -1" in lines
    # The owned accumulator is no longer advanced once detached.
    assert sim.movement.current_value() == pytest.approx(1.4)


def test_detached_value_source_object_is_not_rendered():
    lines: list[str] = []
    sim = Simulation(out=lines.append)
    sim.swap_position_source(None)
    report = sim.run()
    assert not any(line.startswith("Value-source object") for line in lines)
    assert "Value-source object" not in report.labels
    assert report.tick_count == 10


def test_series_matches_ticks():
    report = Simulation(out=lambda line: None).run()
    series = report.series("Value-source object")
    assert len(series) == 10
    times = [t for t, _ in series]
    assert times == pytest.approx([0.1 * k for k in range(1, 11)])

"""Swapping a value source mid-run.

The value-source object starts on a linear accumulator, is frozen in place
by a constant source partway through, and is then handed to a second
accumulator running backwards. The object itself never changes.
"""
from __future__ import annotations

from valuesource import (
    ConstantSource,
    DemoConfig,
    LinearAccumulator,
    Simulation,
    Writer,
    format_text_report,
)
from valuesource.report import DemoReport

FIRST_LEG = 4
HOLD_TICKS = 3


def run_swap_demo(out: Writer = print) -> DemoReport:
    sim = Simulation(config=DemoConfig(name="Source Swap"), out=out)

    for _ in range(FIRST_LEG):
        sim.step()

    held = sim.dvs_object.position
    sim.swap_position_source(ConstantSource(held))
    for _ in range(HOLD_TICKS):
        sim.step()

    retreat = LinearAccumulator(held, -2.0)
    sim.swap_position_source(retreat)
    return sim.run()


if __name__ == "__main__":
    report = run_swap_demo()
    print()
    print(format_text_report(report))

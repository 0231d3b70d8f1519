from __future__ import annotations

from valuesource._types import Writer, format_value
from valuesource.accumulator import LinearAccumulator
from valuesource.classic import CLASSIC_LABEL, ClassicMovingObject
from valuesource.clock import Clock
from valuesource.config import DemoConfig
from valuesource.interpolator import LinearInterpolator
from valuesource.metrics import TraceCollector
from valuesource.objects import MovingObject, ReactiveMovingObject
from valuesource.report import DemoReport, build_report
from valuesource.source import DynamicValueSource
from valuesource.stop import Stop, StopCondition


class Simulation:
    """Runs the classic, value-source and reactive objects through one loop.

    The simulation owns every concrete source. The value-source objects
    only hold references to them, so those sources must live as long as
    the simulation does.
    """

    def __init__(
        self,
        config: DemoConfig | None = None,
        out: Writer = print,
        stop: StopCondition | None = None,
    ) -> None:
        self.config = config if config is not None else DemoConfig()
        self.out = out
        self.stop = stop if stop is not None else Stop.time(self.config.duration)
        self.clock = Clock(self.config.timestep)
        self.collector = TraceCollector()

        cfg = self.config

        # The "normal" way: the object holds its own state.
        self.classic = ClassicMovingObject(
            cfg.classic_start, cfg.classic_velocity, out=out
        )

        # Initialise the source rather than the object, then attach the two.
        self.movement = LinearAccumulator(cfg.accumulator_start, cfg.accumulator_rate)
        self.dvs_object = MovingObject(out=out)
        self.dvs_object.attach_position_source(self.movement)

        # Min and max instead of start and velocity.
        self.lerp = LinearInterpolator(cfg.lerp_min, cfg.lerp_max)
        self.rp_object = ReactiveMovingObject(out=out)
        self.rp_object.attach_position_source(self.lerp)

        self._initial_values = self.positions()

    @property
    def time(self) -> float:
        return self.clock.elapsed

    def positions(self) -> dict[str, float]:
        """Current position of every object that has one, in render order."""
        result = {CLASSIC_LABEL: self.classic.position}
        for obj in (self.dvs_object, self.rp_object):
            value = obj.position
            if value is not None:
                result[obj.label] = value
        return result

    def swap_position_source(self, source: DynamicValueSource[float] | None) -> None:
        """Hand the value-source object over to a different source mid-run."""
        self.dvs_object.attach_position_source(source)

    def step(self) -> dict[str, float]:
        """Run one tick and return the rendered positions."""
        dt = self.clock.dt
        tick = self.clock.advance()
        time = self.clock.elapsed
        self.collector.record_tick(tick, time)

        if self.config.show_ticks:
            self.out(f"Tick at {format_value(time)}")

        # 1. Advance the stepped objects
        self.classic.advance(dt)
        self.dvs_object.advance(dt)

        # 2. Drive the reactive object's data stream from out here
        self.lerp.set_fraction(time)

        # 3. Render everybody
        self.classic.render()
        self.dvs_object.render()
        self.rp_object.render()

        positions = self.positions()
        for label, value in positions.items():
            self.collector.record_position(tick, time, label, value)
        return positions

    def run(self) -> DemoReport:
        while not self.stop.is_met(self.clock):
            self.step()
        return self._build_report("Stop condition met")

    def _build_report(self, outcome: str) -> DemoReport:
        return build_report(
            collector=self.collector,
            name=self.config.name,
            stop_description=self.stop.describe(),
            outcome=outcome,
            total_time=self.clock.elapsed,
            initial_values=self._initial_values,
        )

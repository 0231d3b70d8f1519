from __future__ import annotations

from dataclasses import dataclass, field

from valuesource.metrics import PositionSnapshot, TickEvent, TraceCollector


@dataclass
class DemoReport:
    """Container for a finished demo run."""

    name: str = ""
    stop_description: str = ""
    outcome: str = ""
    total_time: float = 0.0

    # Raw trace
    ticks: list[TickEvent] = field(default_factory=list)
    snapshots: list[PositionSnapshot] = field(default_factory=list)

    # Derived
    labels: list[str] = field(default_factory=list)
    initial_values: dict[str, float] = field(default_factory=dict)
    final_values: dict[str, float] = field(default_factory=dict)

    @property
    def tick_count(self) -> int:
        return len(self.ticks)

    def series(self, label: str) -> list[tuple[float, float]]:
        """Return (time, value) series for one object."""
        return [(s.time, s.value) for s in self.snapshots if s.label == label]

    def final_value(self, label: str) -> float | None:
        return self.final_values.get(label)


def build_report(
    collector: TraceCollector,
    name: str,
    stop_description: str,
    outcome: str,
    total_time: float,
    initial_values: dict[str, float] | None = None,
) -> DemoReport:
    """Build a DemoReport from a collected trace."""
    final_values: dict[str, float] = {}
    for s in collector.snapshots:
        final_values[s.label] = s.value

    return DemoReport(
        name=name,
        stop_description=stop_description,
        outcome=outcome,
        total_time=total_time,
        ticks=list(collector.ticks),
        snapshots=list(collector.snapshots),
        labels=collector.labels(),
        initial_values=dict(initial_values or {}),
        final_values=final_values,
    )

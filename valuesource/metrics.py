from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TickEvent:
    tick: int
    time: float


@dataclass
class PositionSnapshot:
    tick: int
    time: float
    label: str
    value: float


class TraceCollector:
    """Collects per-tick positions of every rendered object."""

    def __init__(self) -> None:
        self.ticks: list[TickEvent] = []
        self.snapshots: list[PositionSnapshot] = []

    def record_tick(self, tick: int, time: float) -> None:
        self.ticks.append(TickEvent(tick=tick, time=time))

    def record_position(self, tick: int, time: float, label: str, value: float) -> None:
        self.snapshots.append(
            PositionSnapshot(tick=tick, time=time, label=label, value=value)
        )

    def labels(self) -> list[str]:
        """Labels in first-seen order."""
        seen: dict[str, None] = {}
        for s in self.snapshots:
            seen.setdefault(s.label, None)
        return list(seen)

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DemoConfig:
    """Fixed constants for the demo loop and the initial state of each object."""

    name: str = "Value Source Demo"
    timestep: float = 0.1
    duration: float = 1.0
    classic_start: float = 1.0
    classic_velocity: float = 4.0
    accumulator_start: float = 1.0
    accumulator_rate: float = 4.0
    lerp_min: float = 1.0
    lerp_max: float = 5.0
    show_ticks: bool = True

# valuesource: dependency inversion for time-varying values

from valuesource._types import Writer, clamp, format_value
from valuesource.source import ValueSource, DynamicValueSource, ConstantSource
from valuesource.interpolator import LinearInterpolator
from valuesource.accumulator import LinearAccumulator
from valuesource.classic import ClassicMovingObject
from valuesource.objects import MovingObject, ReactiveMovingObject
from valuesource.config import DemoConfig
from valuesource.clock import Clock
from valuesource.stop import StopCondition, Stop
from valuesource.metrics import TraceCollector, TickEvent, PositionSnapshot
from valuesource.report import DemoReport, build_report
from valuesource.simulation import Simulation
from valuesource.formatting import format_text_report

__all__ = [
    # Types
    "Writer",
    "clamp",
    "format_value",
    # Capabilities
    "ValueSource",
    "DynamicValueSource",
    "ConstantSource",
    # Sources
    "LinearInterpolator",
    "LinearAccumulator",
    # Objects
    "ClassicMovingObject",
    "MovingObject",
    "ReactiveMovingObject",
    # Config
    "DemoConfig",
    # Loop
    "Clock",
    "StopCondition",
    "Stop",
    # Simulation
    "TraceCollector",
    "TickEvent",
    "PositionSnapshot",
    "Simulation",
    "DemoReport",
    "build_report",
    # Formatting
    "format_text_report",
]

from __future__ import annotations

from valuesource._types import format_value
from valuesource.report import DemoReport


def format_text_report(report: DemoReport) -> str:
    """Format a demo report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + f" {report.name} " + "=" * 30)
    lines.append(f"Stop: {report.stop_description}")
    lines.append(
        f"Result: {report.outcome} after {report.tick_count} ticks "
        f"at {format_value(report.total_time)}s"
    )
    lines.append("")

    if report.labels:
        lines.append("POSITIONS:")
        width = max(len(label) for label in report.labels) + 2
        for label in report.labels:
            start = report.initial_values.get(label)
            final = report.final_values.get(label)
            start_str = format_value(start) if start is not None else "-"
            final_str = format_value(final) if final is not None else "-"
            lines.append(f"  {label:.<{width}s} {start_str} -> {final_str}")
    else:
        lines.append("POSITIONS: none recorded")

    return "\n".join(lines)

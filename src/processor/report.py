"""Console report rendering.

Every function returns the lines to print; the pipeline decides where
they go. All of them except ``short_header`` and ``overall_mean_voltage``
expect a non-empty ReadingSet.
"""

from __future__ import annotations

from pathlib import Path

from src.processor.reading_set import ReadingSet
from src.processor.timefmt import hhmmss

SHORT_HEADER = "Date     Start    End      Max    At       Readings Total     MeanV Outages"


def full_report(readings: ReadingSet, filename: str) -> list[str]:
    """Multi-line summary of one file."""
    peak = readings.max_reading()
    low = readings.min_reading()
    first, last = readings.first, readings.last
    return [
        f"Processed     : {filename}",
        f"Maximum power : {peak.power_now} W at {hhmmss(peak.timestamp)}",
        f"Minimum power : {low.power_now} W at {hhmmss(low.timestamp)}",
        f"Total energy  : {readings.total_energy()} Wh",
        f"First reading : {hhmmss(first.timestamp)} ({first.power_now} W)",
        f"Last reading  : {hhmmss(last.timestamp)} ({last.power_now} W)",
        f"Total readings: {len(readings)}",
        f"Outages       : {len(readings.outages)}",
    ]


def short_header() -> str:
    return SHORT_HEADER


def short_line(readings: ReadingSet, filename: str) -> str:
    """One fixed-width line per file, aligned under SHORT_HEADER."""
    peak = readings.max_reading()
    return (
        f"{Path(filename).stem} "
        f"{hhmmss(readings.first.timestamp)} "
        f"{hhmmss(readings.last.timestamp)} "
        f"{peak.power_now:4d} W "
        f"{hhmmss(peak.timestamp)} "
        f"{len(readings):3d}      "
        f"{readings.total_energy():5d} Wh  "
        f"{readings.mean_voltage():.1f} "
        f"{len(readings.outages)}"
    )


def outage_lines(readings: ReadingSet, verbose: bool = False, quiet: bool = False) -> list[str]:
    if not readings.outages:
        return [] if quiet else ["No outages."]
    lines: list[str] = []
    for outage in readings.outages:
        if verbose:
            lines.append(f"Outage at {hhmmss(outage.time)}")
            if outage.before is not None:
                lines.append(
                    f"Before: voltage {outage.before.voltage_now}, "
                    f"wattage {outage.before.power_now}"
                )
            lines.append(
                f"After : voltage {outage.after.voltage_now}, wattage {outage.after.power_now}"
            )
        else:
            lines.append(hhmmss(outage.time))
    return lines


def overall_mean_voltage(voltage_sum: float, voltage_count: int) -> str | None:
    """Mean voltage across every file processed, or None if nothing was read."""
    if voltage_count <= 0:
        return None
    return f"Overall mean voltage = {voltage_sum / voltage_count:.2f}"

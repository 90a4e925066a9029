"""pvoutput.org field sets built from a ReadingSet."""

from __future__ import annotations

from src.processor.reading_set import ReadingSet
from src.processor.timefmt import hhmm, hhmm_nearest5

DEFAULT_CONDITION = "Not Sure"


def build_status_fields(
    readings: ReadingSet,
    date: str,
    round_time: bool = False,
) -> dict[str, str]:
    """Live-status snapshot (addstatus): energy so far and the last sample.

    d : date (YYYYMMDD)
    t : time of the last reading
    v1: energy generated, Wh
    v2: power now, W
    v6: voltage now, V
    """
    last = readings.last
    return {
        "d": date,
        "t": hhmm_nearest5(last.timestamp) if round_time else hhmm(last.timestamp),
        "v1": str(readings.total_energy()),
        "v2": str(last.power_now),
        "v6": str(last.voltage_now),
    }


def build_output_fields(
    readings: ReadingSet,
    date: str,
    condition: str = DEFAULT_CONDITION,
) -> dict[str, str]:
    """End-of-day summary (addoutput).

    d : date (YYYYMMDD)
    g : energy generated, Wh
    pp: peak power, W
    pt: time of peak power, on a 5-minute boundary
    cd: weather condition text
    """
    peak = readings.max_reading()
    return {
        "d": date,
        "g": str(readings.total_energy()),
        "pp": str(peak.power_now),
        "pt": hhmm_nearest5(peak.timestamp),
        "cd": condition,
    }

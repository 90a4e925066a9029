"""Clock-time formatting for reports and uploads."""

from __future__ import annotations

from datetime import datetime


def hhmmss(t: datetime) -> str:
    return t.strftime("%H:%M:%S")


def hhmm(t: datetime) -> str:
    return t.strftime("%H:%M")


def hhmm_nearest5(t: datetime) -> str:
    """HH:MM rounded to the nearest 5 minutes.

    pvoutput.org only accepts times on 5-minute boundaries. A minute that
    rounds up to 60 carries into the hour, so 23:58 becomes "24:00".
    """
    rounded = ((t.minute + 2) // 5) * 5
    if rounded == 60:
        return f"{t.hour + 1:02d}:00"
    return f"{t.hour:02d}:{rounded:02d}"

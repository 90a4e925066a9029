"""Outage: a gap in the log bounded by two valid readings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.contracts.reading import Reading


@dataclass(frozen=True, slots=True)
class Outage:
    """A detected measurement gap.

    ``time`` is the timestamp of the first overflow row of the gap,
    ``before`` the last good reading preceding it (None only if the gap
    opened before any reading was stored) and ``after`` the first good
    reading once it closed.
    """

    time: datetime
    before: Reading | None
    after: Reading

    @property
    def duration_sec(self) -> float:
        """Seconds between the last reading before and the first after."""
        start = self.before.timestamp if self.before is not None else self.time
        return (self.after.timestamp - start).total_seconds()

"""ReadingSet: accumulator for one inverter log file.

Rows are fed strictly in file order through ``add_reading``. Each row is
either an overflow marker (the sensor had no reading) or a good sample.
The set keeps the good samples as Readings, records an Outage each time
a run of overflow rows is closed by a good sample, and infers the
sampling interval once ten consecutive good samples are available.

Energy model
────────────
    total_energy = SUM(power_now) * interval_minutes / 60      (Wh, truncated)

    Each sample is treated as constant power for one interval (left
    rectangles). This is an approximation, not the trapezium rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime

from src.contracts.columns import POWER_COL, TIMESTAMP_COL
from src.contracts.outage import Outage
from src.contracts.reading import Reading, column, parse_timestamp
from src.processor.config import ProcessorConfig
from src.processor.errors import EmptyReadingSetError
from src.processor.state import INITIAL_STATE, InOutage, State, on_overflow, on_reading

log = logging.getLogger(__name__)

# Good readings needed in a row before the interval is inferred
INFERENCE_WINDOW = 10


class ReadingSet:
    """Ordered good readings of one file plus the outages between them."""

    def __init__(self, config: ProcessorConfig | None = None, source: str = "") -> None:
        self.config = config or ProcessorConfig()
        self.source = source
        self.outages: list[Outage] = []
        self.apparent_interval: int = self.config.interval_minutes
        self.state: State = INITIAL_STATE
        self.consecutive_good: int = 0
        self._readings: list[Reading] = []

    # ── Sequence protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[Reading]:
        return iter(self._readings)

    def __getitem__(self, index: int) -> Reading:
        return self._readings[index]

    def size(self) -> int:
        return len(self._readings)

    @property
    def first(self) -> Reading:
        self._require_readings()
        return self._readings[0]

    @property
    def last(self) -> Reading:
        self._require_readings()
        return self._readings[-1]

    @property
    def in_outage(self) -> bool:
        return isinstance(self.state, InOutage)

    @property
    def open_outage_since(self) -> datetime | None:
        """Start of a gap that has not been closed by a good reading yet.

        A gap still open at the end of the file is never turned into an
        Outage; this is the only place it is visible.
        """
        if isinstance(self.state, InOutage):
            return self.state.since
        return None

    # ── Accumulation ─────────────────────────────────────────────────────

    def add_reading(self, row: Sequence[str]) -> Reading | None:
        """Consume one raw row. Returns the stored Reading, or None for an
        overflow row.

        Raises:
            RowParseError: If the row's timestamp cannot be parsed. The
                set is left unchanged in that case.
        """
        if column(row, POWER_COL) == self.config.overflow_marker:
            timestamp = parse_timestamp(column(row, TIMESTAMP_COL))
            self.state = on_overflow(self.state, timestamp)
            self.consecutive_good = 0
            return None

        reading = Reading.from_row(row, self.config)
        self.state, outage_start = on_reading(self.state)
        if outage_start is not None:
            before = self._readings[-1] if self._readings else None
            self.outages.append(Outage(time=outage_start, before=before, after=reading))
            log.debug("Outage %s closed at %s", outage_start, reading.timestamp)

        self._readings.append(reading)
        self.consecutive_good += 1
        if self.consecutive_good >= INFERENCE_WINDOW and self.apparent_interval == 0:
            self._infer_interval()
        return reading

    def extend(self, rows: Iterable[Sequence[str]]) -> ReadingSet:
        for row in rows:
            self.add_reading(row)
        return self

    def _infer_interval(self) -> None:
        """Mean spacing of the last ten readings, rounded to whole minutes."""
        window = self._readings[-INFERENCE_WINDOW:]
        if len(window) < INFERENCE_WINDOW:
            return
        total = sum(
            (later.timestamp - earlier.timestamp).total_seconds()
            for earlier, later in zip(window, window[1:])
        )
        mean_sec = int(total / (INFERENCE_WINDOW - 1))
        minutes = (mean_sec + 30) // 60
        if minutes <= 0:
            # sub-minute or backwards spacing: still unknown, retried later
            log.debug("No usable interval yet (mean spacing %ds)", mean_sec)
            return
        self.apparent_interval = minutes
        log.debug(
            "Apparent interval %d min (mean spacing %ds) in %s",
            self.apparent_interval,
            mean_sec,
            self.source or "<stream>",
        )

    # ── Aggregates ───────────────────────────────────────────────────────

    def _require_readings(self) -> None:
        if not self._readings:
            raise EmptyReadingSetError(f"no readings in {self.source or 'reading set'}")

    def max_reading(self) -> Reading:
        """Reading with the highest power; the earliest one wins ties."""
        self._require_readings()
        return max(self._readings, key=lambda r: r.power_now)

    def min_reading(self) -> Reading:
        """Reading with the lowest power; the earliest one wins ties."""
        self._require_readings()
        return min(self._readings, key=lambda r: r.power_now)

    def max_power(self) -> int:
        return self.max_reading().power_now

    def min_power(self) -> int:
        return self.min_reading().power_now

    def voltage_sum_and_count(self) -> tuple[float, int]:
        return float(sum(r.voltage_now for r in self._readings)), len(self._readings)

    def mean_voltage(self) -> float:
        self._require_readings()
        total, count = self.voltage_sum_and_count()
        return total / count

    def total_energy(self) -> int:
        """Energy in Wh; 0 while the interval is unknown."""
        power_sum = sum(r.power_now for r in self._readings)
        return (power_sum * self.apparent_interval) // 60

    def __repr__(self) -> str:
        return (
            f"ReadingSet(source={self.source!r}, readings={len(self._readings)}, "
            f"outages={len(self.outages)}, interval={self.apparent_interval})"
        )

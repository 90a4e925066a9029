"""CSV loader: inverter log file -> ReadingSet."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from src.contracts.reading import RowParseError
from src.processor.config import ProcessorConfig
from src.processor.reading_set import ReadingSet

log = logging.getLogger(__name__)


def read_csv_file(path: str | Path, config: ProcessorConfig | None = None) -> ReadingSet:
    """Read every row of *path* into a fresh ReadingSet, in file order.

    Blank rows are ignored. Rows whose timestamp cannot be parsed are
    logged and skipped without touching the accumulator.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    p = Path(path)
    readings = ReadingSet(config, source=str(p))
    skipped = 0

    with p.open(encoding="utf-8", errors="replace", newline="") as fh:
        for line_no, row in enumerate(csv.reader(fh), 1):
            if not any(cell.strip() for cell in row):
                continue
            try:
                readings.add_reading(row)
            except RowParseError as exc:
                skipped += 1
                log.warning("%s:%d skipped: %s", p.name, line_no, exc)

    log.info(
        "Read %s: %d readings, %d outages, interval=%d min%s",
        p.name,
        len(readings),
        len(readings.outages),
        readings.apparent_interval,
        f", {skipped} rows skipped" if skipped else "",
    )
    return readings

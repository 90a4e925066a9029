"""Shared fixtures for inverter log processor tests."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from src.contracts.columns import OVERFLOW_MARKER
from src.processor.config import ProcessorConfig

BASE_TS = "2012-06-01 10:00:00"

# ── Helper: build a raw inverter row with sensible defaults ─────────────


def ts_offset(base: str = BASE_TS, seconds: int = 0) -> str:
    """Return *base* shifted by *seconds*, in the inverter's own format."""
    dt = datetime.strptime(base, "%Y-%m-%d %H:%M:%S") + timedelta(seconds=seconds)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def make_row(
    *,
    timestamp: str = BASE_TS,
    power: int | str = 100,
    ac_volts: int | str = 240,
    dc_volts: int | str = 310,
) -> list[str]:
    """11-column row: [0]=time, [5]=power, [7]=AC volts, [10]=DC volts."""
    row = [""] * 11
    row[0] = timestamp
    row[1] = "1.5"      # PV current, unused
    row[5] = str(power)
    row[7] = str(ac_volts)
    row[10] = str(dc_volts)
    return row


def overflow_row(timestamp: str = BASE_TS) -> list[str]:
    return make_row(timestamp=timestamp, power=OVERFLOW_MARKER)


def spaced_rows(powers: list[int], spacing_sec: int = 300, start: str = BASE_TS) -> list[list[str]]:
    """One good row per power value, *spacing_sec* apart."""
    return [
        make_row(timestamp=ts_offset(start, i * spacing_sec), power=p)
        for i, p in enumerate(powers)
    ]


def write_csv(path: Path, rows: list[list[str]]) -> Path:
    with path.open("w", encoding="utf-8", newline="") as fh:
        csv.writer(fh).writerows(rows)
    return path


# ── Fake HTTP session (stands in for requests.Session) ──────────────────


@dataclass
class FakeResponse:
    status_code: int = 200
    text: str = "OK 200: Added Status"


@dataclass
class FakeSession:
    responses: list[FakeResponse] = field(default_factory=list)
    raise_exc: Exception | None = None
    headers: dict[str, str] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    def post(self, url: str, data: dict[str, str], timeout: float) -> FakeResponse:
        self.calls.append({"url": url, "data": data, "timeout": timeout})
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse()

    def close(self) -> None:
        self.closed = True


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def config() -> ProcessorConfig:
    return ProcessorConfig()


@pytest.fixture
def day_file(tmp_path: Path) -> Path:
    """A small day: 10 readings at 5-minute spacing, one gap, 2 more readings."""
    rows = spaced_rows([100, 200, 300, 400, 500, 600, 500, 400, 300, 200])
    rows.append(overflow_row(ts_offset(seconds=10 * 300)))
    rows.append(overflow_row(ts_offset(seconds=11 * 300)))
    rows.append(make_row(timestamp=ts_offset(seconds=12 * 300), power=150, ac_volts=238))
    rows.append(make_row(timestamp=ts_offset(seconds=13 * 300), power=50, ac_volts=236))
    return write_csv(tmp_path / "20120601.csv", rows)

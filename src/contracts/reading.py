"""Reading: one validated power/voltage sample."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.contracts.columns import AC_VOLTAGE_COL, DC_VOLTAGE_COL, POWER_COL, TIMESTAMP_COL
from src.contracts.enums import VoltageSource

if TYPE_CHECKING:
    from src.processor.config import ProcessorConfig

# ── Timestamp strptime patterns ──────────────────────────────────────────────
_TS_PATTERNS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y/%m/%d %H:%M:%S",
    "%d/%m/%Y %H:%M:%S",
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class RowParseError(ValueError):
    """A raw row cannot be turned into a Reading (e.g. bad timestamp)."""


def parse_timestamp(text: str | None) -> datetime:
    """Parse the timestamp column of a row.

    Raises:
        RowParseError: If the text matches none of the known layouts.
    """
    if not text or not text.strip():
        raise RowParseError("missing timestamp")
    text = text.strip()
    for pattern in _TS_PATTERNS:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise RowParseError(f"unparseable timestamp {text!r}") from exc
    # Offsets are folded into naive UTC so every Reading compares with every other
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def lenient_int(text: str | None) -> int:
    """Leading integer of *text*; 0 when there is none. Never negative.

    ``"250"`` → 250, ``"12.7"`` → 12, ``"250W"`` → 250, ``"n/a"`` → 0.
    """
    if text is None:
        return 0
    m = _LEADING_INT.match(text)
    if not m:
        return 0
    return max(int(m.group(1)), 0)


def column(row: Sequence[str], index: int) -> str | None:
    """Column *index* of *row*, or None if the row is too short."""
    return row[index] if index < len(row) else None


@dataclass(frozen=True, slots=True)
class Reading:
    """One sample after the fixed deduction has been applied."""

    timestamp: datetime
    raw_power: int          # W, as reported
    power_now: int          # W, max(raw_power - deduct_watts, 0)
    voltage_now: int        # V, AC or DC depending on the run

    @classmethod
    def from_row(cls, row: Sequence[str], config: ProcessorConfig) -> Reading:
        timestamp = parse_timestamp(column(row, TIMESTAMP_COL))
        raw_power = lenient_int(column(row, POWER_COL))
        if raw_power > config.deduct_watts:
            power_now = raw_power - config.deduct_watts
        else:
            power_now = 0
        if config.voltage_source is VoltageSource.DC:
            voltage = lenient_int(column(row, DC_VOLTAGE_COL))
        else:
            voltage = lenient_int(column(row, AC_VOLTAGE_COL))
        return cls(
            timestamp=timestamp,
            raw_power=raw_power,
            power_now=power_now,
            voltage_now=voltage,
        )

    def __str__(self) -> str:
        return f"Time: {self.timestamp} Power: {self.power_now}"

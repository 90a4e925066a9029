"""Processing options fixed for a whole run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.contracts.columns import OVERFLOW_MARKER
from src.contracts.enums import VoltageSource


@dataclass(frozen=True, slots=True)
class ProcessorConfig:
    """Immutable options handed to every ReadingSet.

    deduct_watts     : fixed offset subtracted from each power reading
    interval_minutes : sampling interval; 0 means infer it from the data
    voltage_source   : which voltage column to report (AC or DC)
    overflow_marker  : power-column literal that marks a missing reading
    """

    deduct_watts: int = 0
    interval_minutes: int = 0
    voltage_source: VoltageSource = VoltageSource.AC
    overflow_marker: str = OVERFLOW_MARKER

    def __post_init__(self) -> None:
        if self.deduct_watts < 0:
            raise ValueError(f"deduct_watts must be >= 0, got {self.deduct_watts}")
        if self.interval_minutes < 0:
            raise ValueError(f"interval_minutes must be >= 0, got {self.interval_minutes}")

    @classmethod
    def from_dict(cls, cfg: dict[str, Any]) -> ProcessorConfig:
        """Build from the ``processing`` section of the YAML config."""
        return cls(
            deduct_watts=int(cfg.get("deduct_watts", 0)),
            interval_minutes=int(cfg.get("interval_minutes", 0)),
            voltage_source=VoltageSource(str(cfg.get("voltage_source", "ac")).lower()),
            overflow_marker=str(cfg.get("overflow_marker", OVERFLOW_MARKER)),
        )

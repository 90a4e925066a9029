"""Value types shared by the processor and the uploader."""

from src.contracts.enums import VoltageSource
from src.contracts.outage import Outage
from src.contracts.reading import Reading, RowParseError

__all__ = ["Outage", "Reading", "RowParseError", "VoltageSource"]

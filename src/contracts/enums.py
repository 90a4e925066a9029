"""Canonical enumerations for inverter log processing."""

from __future__ import annotations

from enum import Enum


class VoltageSource(str, Enum):
    AC = "ac"
    DC = "dc"

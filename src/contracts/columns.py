"""Column layout of one inverter log row.

The positions are fixed by the inverter's logging interface.
"""

from __future__ import annotations

TIMESTAMP_COL = 0
POWER_COL = 5
AC_VOLTAGE_COL = 7
DC_VOLTAGE_COL = 10

# Literal the inverter writes into the power column when the sensor has no reading
OVERFLOW_MARKER = "overflow"

"""Outage state of a ReadingSet.

Two states only:

    Normal             : the last row seen was a good reading
    InOutage(since)    : one or more overflow rows seen since the last
                          good reading; ``since`` is the timestamp of the
                          first of them

A fresh ReadingSet starts in ``InOutage(since=None)``: the gap before the
first reading of a file is a warm-up, not an outage, so closing it must
not produce an Outage record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Normal:
    pass


@dataclass(frozen=True, slots=True)
class InOutage:
    since: datetime | None


State = Normal | InOutage

INITIAL_STATE: State = InOutage(since=None)


def on_overflow(state: State, timestamp: datetime) -> State:
    """Transition for an overflow row seen at *timestamp*.

    Consecutive overflow rows collapse into the outage already open.
    """
    if isinstance(state, Normal):
        return InOutage(since=timestamp)
    return state


def on_reading(state: State) -> tuple[State, datetime | None]:
    """Transition for a good reading.

    Returns the new state and the start time of the outage the reading
    closes, or None when there is nothing to record (already normal, or
    the warm-up gap).
    """
    if isinstance(state, InOutage):
        return Normal(), state.since
    return state, None

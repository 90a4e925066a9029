"""Tests for src.processor.state: outage state transitions."""

from __future__ import annotations

from datetime import datetime

from src.processor.state import INITIAL_STATE, InOutage, Normal, on_overflow, on_reading

T1 = datetime(2012, 6, 1, 10, 0, 0)
T2 = datetime(2012, 6, 1, 10, 5, 0)


class TestInitialState:
    def test_starts_in_warm_up(self):
        assert INITIAL_STATE == InOutage(since=None)


class TestOnOverflow:
    def test_normal_opens_outage(self):
        assert on_overflow(Normal(), T1) == InOutage(since=T1)

    def test_open_outage_keeps_first_timestamp(self):
        assert on_overflow(InOutage(since=T1), T2) == InOutage(since=T1)

    def test_warm_up_stays_warm_up(self):
        assert on_overflow(INITIAL_STATE, T1) == InOutage(since=None)


class TestOnReading:
    def test_normal_stays_normal(self):
        assert on_reading(Normal()) == (Normal(), None)

    def test_closes_outage(self):
        assert on_reading(InOutage(since=T1)) == (Normal(), T1)

    def test_warm_up_closes_without_record(self):
        assert on_reading(INITIAL_STATE) == (Normal(), None)

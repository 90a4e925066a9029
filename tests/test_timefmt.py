"""Tests for src.processor.timefmt."""

from __future__ import annotations

from datetime import datetime

import pytest

from src.processor.timefmt import hhmm, hhmm_nearest5, hhmmss


def _t(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2012, 6, 1, hour, minute, second)


def test_hhmmss():
    assert hhmmss(_t(9, 5, 7)) == "09:05:07"


def test_hhmm():
    assert hhmm(_t(9, 5, 59)) == "09:05"


@pytest.mark.parametrize(
    ("hour", "minute", "expected"),
    [
        (10, 0, "10:00"),
        (10, 2, "10:00"),
        (10, 3, "10:05"),
        (10, 7, "10:05"),
        (10, 8, "10:10"),
        (10, 57, "10:55"),
        (10, 58, "11:00"),
        (23, 59, "24:00"),
    ],
)
def test_hhmm_nearest5(hour, minute, expected):
    assert hhmm_nearest5(_t(hour, minute)) == expected

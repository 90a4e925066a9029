"""Tests for src.processor.loader: CSV file -> ReadingSet."""

from __future__ import annotations

import logging

import pytest

from src.processor.config import ProcessorConfig
from src.processor.loader import read_csv_file
from tests.conftest import make_row, overflow_row, spaced_rows, ts_offset, write_csv


class TestReadCsvFile:
    def test_day_file(self, day_file):
        rs = read_csv_file(day_file)
        assert rs.size() == 12
        assert len(rs.outages) == 1
        assert rs.apparent_interval == 5
        assert rs.source == str(day_file)

    def test_config_is_applied(self, day_file):
        rs = read_csv_file(day_file, ProcessorConfig(deduct_watts=100, interval_minutes=10))
        assert rs.apparent_interval == 10
        assert rs.min_power() == 0
        assert rs.max_power() == 500

    def test_blank_lines_ignored(self, tmp_path):
        path = tmp_path / "blank.csv"
        rows = spaced_rows([100, 200])
        with path.open("w", encoding="utf-8") as fh:
            fh.write(",".join(rows[0]) + "\n\n   \n" + ",".join(rows[1]) + "\n")
        rs = read_csv_file(path)
        assert rs.size() == 2

    def test_bad_timestamp_row_skipped(self, tmp_path, caplog):
        rows = [
            make_row(timestamp=ts_offset(seconds=0), power=100),
            make_row(timestamp="Date/Time", power="Pac"),
            make_row(timestamp=ts_offset(seconds=300), power=200),
        ]
        path = write_csv(tmp_path / "header.csv", rows)
        with caplog.at_level(logging.WARNING):
            rs = read_csv_file(path)
        assert rs.size() == 2
        assert "header.csv:2 skipped" in caplog.text

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        rs = read_csv_file(path)
        assert rs.size() == 0

    def test_only_overflow(self, tmp_path):
        path = write_csv(tmp_path / "night.csv", [overflow_row(ts_offset(seconds=i)) for i in range(3)])
        rs = read_csv_file(path)
        assert rs.size() == 0
        assert rs.in_outage

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_csv_file(tmp_path / "nope.csv")

"""Pipeline: for each input file: load -> (list outages | upload | report)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.processor.config import ProcessorConfig
from src.processor.loader import read_csv_file
from src.processor.report import (
    full_report,
    outage_lines,
    overall_mean_voltage,
    short_header,
    short_line,
)
from src.uploader.client import PvOutputClient, PvOutputSettings, UploadError, send_to_pvoutput

log = logging.getLogger(__name__)

MISSING_UPLOAD_CONFIG = (
    "Must specify a date, system id and key in order to send to pvoutput.org"
)


class OutputMode(str, Enum):
    FULL = "full"
    SHORT = "short"
    OUTAGES = "outages"
    SEND = "send"


@dataclass
class RunOptions:
    """What to do with each file once it has been read."""

    mode: OutputMode = OutputMode.FULL
    verbose: bool = False
    quiet: bool = False
    date: str | None = None
    pvoutput: PvOutputSettings = field(default_factory=PvOutputSettings)

    @property
    def can_upload(self) -> bool:
        return bool(self.date and self.pvoutput.system_id and self.pvoutput.api_key)


def _build_client(settings: PvOutputSettings) -> PvOutputClient:
    if not settings.system_id or not settings.api_key:
        raise ValueError("pvoutput system id and API key are required to upload")
    return PvOutputClient(
        system_id=settings.system_id,
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout_sec=settings.timeout_sec,
    )


def run_pipeline(
    files: list[str],
    config: ProcessorConfig,
    options: RunOptions,
    client: PvOutputClient | None = None,
) -> dict[str, Any]:
    """Process *files* in order, printing or uploading per *options*.

    Returns
    -------
    dict with keys: processed, empty, missing, uploads (file -> result),
    voltage_sum, voltage_count.
    """
    summary: dict[str, Any] = {
        "processed": 0,
        "empty": [],
        "missing": [],
        "uploads": {},
        "voltage_sum": 0.0,
        "voltage_count": 0,
    }

    if options.mode is OutputMode.SHORT:
        print(short_header())

    owned_client: PvOutputClient | None = None
    if options.mode is OutputMode.SEND and options.can_upload and client is None:
        client = owned_client = _build_client(options.pvoutput)

    try:
        _process_files(files, config, options, client, summary)
    finally:
        if owned_client is not None:
            owned_client.close()

    if options.mode is OutputMode.SHORT:
        overall = overall_mean_voltage(summary["voltage_sum"], summary["voltage_count"])
        if overall:
            print(overall)

    log.info(
        "Done: %d files processed, %d empty, %d missing",
        summary["processed"],
        len(summary["empty"]),
        len(summary["missing"]),
    )
    return summary


def _process_files(
    files: list[str],
    config: ProcessorConfig,
    options: RunOptions,
    client: PvOutputClient | None,
    summary: dict[str, Any],
) -> None:
    for filename in files:
        log.debug("Processing %s", filename)
        if options.verbose:
            print(f"Processing {filename}")
        try:
            readings = read_csv_file(filename, config)
        except FileNotFoundError:
            log.error("Input file not found: %s", filename)
            summary["missing"].append(filename)
            continue

        if len(readings) == 0:
            summary["empty"].append(filename)
            if not options.quiet:
                print(f"{filename} empty.")
            continue

        summary["processed"] += 1
        if options.mode is OutputMode.OUTAGES:
            for line in outage_lines(readings, verbose=options.verbose, quiet=options.quiet):
                print(line)
        elif options.mode is OutputMode.SEND:
            if client is None or not options.can_upload:
                print(MISSING_UPLOAD_CONFIG)
            else:
                try:
                    summary["uploads"][filename] = send_to_pvoutput(
                        readings,
                        client,
                        options.date or "",
                        round_status_time=options.pvoutput.round_status_time,
                        condition=options.pvoutput.condition,
                    )
                except UploadError as exc:
                    log.error("Upload of %s failed: %s", filename, exc)
                    summary["uploads"][filename] = None
        elif options.mode is OutputMode.SHORT:
            print(short_line(readings, filename))
        else:
            for line in full_report(readings, filename):
                print(line)

        v_sum, v_count = readings.voltage_sum_and_count()
        summary["voltage_sum"] += v_sum
        summary["voltage_count"] += v_count

"""CLI entry-point for the inverter log processor.

Usage examples
--------------
# Summary of one day's log:
python -m src.processor data/20120601.csv

# One line per file, DC voltage, 30 W standby draw removed:
python -m src.processor --short --dcvolts --deduct 30 data/*.csv

# List the gaps in a file, with the readings either side:
python -m src.processor --outages --verbose data/20120601.csv

# Upload to pvoutput.org (id/key may also come from --config):
python -m src.processor --send -d 20120601 -i 12345 -k SECRET data/20120601.csv
"""

from __future__ import annotations

import argparse
from typing import Any

from src.contracts.enums import VoltageSource
from src.processor.config import ProcessorConfig
from src.processor.pipeline import OutputMode, RunOptions, run_pipeline
from src.shared.config_loader import load_yaml
from src.shared.logger import setup_logging
from src.uploader.client import PvOutputSettings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="processpv",
        description="Summarise solar inverter CSV logs and optionally upload them to pvoutput.org",
    )
    p.add_argument(
        "files",
        nargs="*",
        help="Inverter CSV log files, processed in the order given.",
    )
    p.add_argument(
        "-d",
        "--date",
        metavar="YYYYMMDD",
        default=None,
        help="Effective date of the data (required for --send).",
    )
    p.add_argument(
        "--deduct",
        metavar="WATTS",
        type=int,
        default=None,
        help="Reduce each individual reading by WATTS.",
    )
    p.add_argument(
        "--dcvolts",
        action="store_true",
        default=False,
        help="Process DC voltage instead of AC voltage.",
    )
    p.add_argument(
        "-i",
        "--id",
        dest="system_id",
        default=None,
        help="pvoutput.org system id.",
    )
    p.add_argument(
        "-k",
        "--key",
        dest="api_key",
        default=None,
        help="pvoutput.org API key.",
    )
    p.add_argument(
        "--interval",
        metavar="MINUTES",
        type=int,
        default=None,
        help="Explicit interval between readings, in minutes. "
        "If omitted it is inferred from the first ten consecutive readings.",
    )
    p.add_argument(
        "-o",
        "--outages",
        action="store_true",
        default=False,
        help="List outages from the file(s).",
    )
    p.add_argument(
        "-s",
        "--send",
        action="store_true",
        default=False,
        help="Send data to pvoutput.org.",
    )
    p.add_argument(
        "--short",
        action="store_true",
        default=False,
        help="Produce short (just one line) output for each file.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Be more verbose about what is found.",
    )
    p.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Be quiet, especially for use in cron jobs.",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with 'processing' and 'pvoutput' sections.",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. Default: INFO (DEBUG with -v, WARNING with -q).",
    )
    return p


def _select_mode(args: argparse.Namespace) -> OutputMode:
    if args.outages:
        return OutputMode.OUTAGES
    if args.send:
        return OutputMode.SEND
    if args.short:
        return OutputMode.SHORT
    return OutputMode.FULL


def _log_level(args: argparse.Namespace) -> str:
    if args.log_level:
        return args.log_level
    if args.quiet:
        return "WARNING"
    if args.verbose:
        return "DEBUG"
    return "INFO"


def build_config(args: argparse.Namespace, file_cfg: dict[str, Any]) -> ProcessorConfig:
    """Merge the YAML ``processing`` section with command-line overrides."""
    processing = dict(file_cfg.get("processing") or {})
    if args.deduct is not None:
        processing["deduct_watts"] = args.deduct
    if args.interval is not None:
        processing["interval_minutes"] = args.interval
    if args.dcvolts:
        processing["voltage_source"] = VoltageSource.DC.value
    return ProcessorConfig.from_dict(processing)


def build_options(args: argparse.Namespace, file_cfg: dict[str, Any]) -> RunOptions:
    """Merge the YAML ``pvoutput`` section with command-line overrides."""
    pv = dict(file_cfg.get("pvoutput") or {})
    if args.system_id is not None:
        pv["system_id"] = args.system_id
    if args.api_key is not None:
        pv["api_key"] = args.api_key
    return RunOptions(
        mode=_select_mode(args),
        verbose=args.verbose,
        quiet=args.quiet,
        date=args.date,
        pvoutput=PvOutputSettings.from_dict(pv),
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(_log_level(args))

    file_cfg = load_yaml(args.config) if args.config else {}
    try:
        config = build_config(args, file_cfg)
        options = build_options(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    run_pipeline(args.files, config, options)


if __name__ == "__main__":
    main()

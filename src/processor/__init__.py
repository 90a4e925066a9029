"""Inverter log processor.

Modules
───────
  config     : immutable per-run options
  state      : Normal / InOutage transitions
  reading_set: rows → readings, outages, interval, energy
  loader     : CSV file → ReadingSet
  timefmt    : clock-time formatting helpers
  report     : console report lines
  pipeline   : process a list of files in one of the output modes
  cli        : argparse entry-point
"""

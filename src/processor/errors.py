"""Processor exceptions."""

from __future__ import annotations


class EmptyReadingSetError(LookupError):
    """An aggregate was requested from a ReadingSet with no readings."""

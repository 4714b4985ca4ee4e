"""Calendar helpers for date-bearing identifiers."""

from __future__ import annotations

from datetime import date

from natid.util.strings import isdigits


def parse_date_compact_yyyymmdd(value: str) -> date | None:
    """Return the date encoded as ``YYYYMMDD`` or None if it is not a real date."""
    if len(value) != 8 or not isdigits(value):
        return None
    try:
        return date(int(value[0:4]), int(value[4:6]), int(value[6:8]))
    except ValueError:
        return None


def is_valid_date_compact_yyyymmdd(value: str) -> bool:
    """True if *value* is a calendar-valid ``YYYYMMDD`` date (leap years included)."""
    return parse_date_compact_yyyymmdd(value) is not None

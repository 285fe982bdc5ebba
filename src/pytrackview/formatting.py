"""Display helpers for the UI layer."""

from __future__ import annotations

from datetime import date

from pytrackview.ingestion.normalize import split_dmy


def format_date(date_string: str | None) -> str:
    """Format a ``DD-MM-YYYY`` string as ``"Aug 08, 2025"``.

    Empty input gives ``""``. Anything that is not a valid day-month-year
    triple is returned unchanged.
    """
    if not date_string:
        return ""
    fields = split_dmy(date_string)
    if fields is None:
        return date_string
    day, month, year = fields
    try:
        value = date(year, month, day)
    except ValueError:
        return date_string
    return value.strftime("%b %d, %Y")

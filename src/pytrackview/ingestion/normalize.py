"""Normalization helpers.

Centralizes defensive parsing of upstream coordinate objects. The upstream
service makes no shape guarantees, so every helper returns ``None`` instead
of raising.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, time
from typing import Any

from pytrackview._constants import DATE_SEPARATOR


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def split_dmy(value: Any) -> tuple[int, int, int] | None:
    """Split a ``DD-MM-YYYY`` string into ``(day, month, year)`` integers.

    The field order is fixed: day first, then month, then year. A string that
    does not have exactly three numeric parts returns ``None``.
    """
    text = safe_str(value)
    if text is None:
        return None
    parts = text.split(DATE_SEPARATOR)
    if len(parts) != 3 or not all(part.strip().isdigit() for part in parts):
        return None
    day, month, year = (int(part) for part in parts)
    return day, month, year


def parse_dmy_date(value: Any) -> date | None:
    """Parse a ``DD-MM-YYYY`` string into a :class:`date`.

    ``"05-12-2025"`` is December 5th 2025. Year must have four digits so an
    ISO ``YYYY-MM-DD`` string is never silently misread.
    """
    if isinstance(value, date):
        return value
    text = safe_str(value)
    if text is None or len(text.split(DATE_SEPARATOR)[-1].strip()) != 4:
        return None
    fields = split_dmy(text)
    if fields is None:
        return None
    day, month, year = fields
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_time_of_day(value: Any) -> time | None:
    """Parse ``HH:MM`` or ``HH:MM:SS``."""
    if isinstance(value, time):
        return value
    text = safe_str(value)
    if text is None:
        return None
    try:
        return time.fromisoformat(text)
    except ValueError:
        return None


def dig(data: Any, *path: str) -> Any:
    """Follow ``path`` through nested mappings, ``None`` on any miss."""
    current = data
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current

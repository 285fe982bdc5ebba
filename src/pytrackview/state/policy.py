"""Selection validity rules.

This module contains *no* state. The store calls these helpers so that the
rules deciding whether an index may stay selected live in one place.
"""

from __future__ import annotations

from typing import Any


def is_valid_index(index: Any, length: int) -> bool:
    """Return ``True`` when ``index`` addresses an element of a sequence of ``length``."""
    # bool is an int subclass; True must not select element 1.
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < length


def resolve_selection(index: Any, length: int) -> int | None:
    """Map a requested index to the resulting selection.

    Out-of-range requests degrade to no selection instead of raising: a click
    queued before a concurrent replace must not crash the UI.
    """
    return index if is_valid_index(index, length) else None


def revalidate(selected: int | None, length: int) -> int | None:
    """Keep ``selected`` only if it is still inside a sequence of ``length``."""
    if selected is None:
        return None
    return selected if selected < length else None

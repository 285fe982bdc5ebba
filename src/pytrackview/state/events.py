"""Change notifications emitted by the selection store.

Observers (map, sidebar) receive a :class:`StoreEvent` after every mutation
that changed state, carrying an immutable snapshot to render from.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from pytrackview.models.location import LocationRecord


class StoreChange(StrEnum):
    LOCATIONS = "locations"
    SELECTION = "selection"
    LOADING = "loading"
    ERROR = "error"


class StoreSnapshot(BaseModel):
    """Consistent view of the store at one instant."""

    model_config = ConfigDict(frozen=True)

    locations: tuple[LocationRecord, ...] = ()
    selected_index: int | None = None
    loading: bool = False
    error: str | None = None

    @property
    def selected_location(self) -> LocationRecord | None:
        if self.selected_index is None or not 0 <= self.selected_index < len(self.locations):
            return None
        return self.locations[self.selected_index]

    @property
    def has_locations(self) -> bool:
        return bool(self.locations)


class StoreEvent(BaseModel):
    """A state change delivered to store observers."""

    model_config = ConfigDict(frozen=True)

    changes: frozenset[StoreChange] = Field(..., description="Which parts of the state changed")
    snapshot: StoreSnapshot

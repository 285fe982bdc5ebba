"""Selection store.

This is the only component allowed to hold the location sequence and the
selected index. Map and sidebar both call into the same instance, so they can
never disagree about which location is selected.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from pytrackview.models.location import LocationRecord
from pytrackview.state.events import StoreChange, StoreEvent, StoreSnapshot
from pytrackview.state.policy import resolve_selection, revalidate

_logger = logging.getLogger(__name__)

StoreObserver = Callable[[StoreEvent], None]


class SelectionStore:
    """In-memory owner of the location sequence and the current selection.

    Every operation runs under a single re-entrant lock so that the
    ``(locations, selected_index)`` pair is always read and written together.
    Observers are called after the lock is released, in subscription order.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._locations: tuple[LocationRecord, ...] = ()
        self._selected_index: int | None = None
        self._loading = False
        self._error: str | None = None
        self._observers: list[StoreObserver] = []

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def locations(self) -> tuple[LocationRecord, ...]:
        with self._lock:
            return self._locations

    @property
    def selected_index(self) -> int | None:
        with self._lock:
            return self._selected_index

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._loading

    @property
    def error(self) -> str | None:
        with self._lock:
            return self._error

    @property
    def selected_location(self) -> LocationRecord | None:
        return self.current_selection()

    def current_selection(self) -> LocationRecord | None:
        """Return the selected record, or ``None`` when nothing valid is selected."""
        with self._lock:
            index = self._selected_index
            if index is None or not 0 <= index < len(self._locations):
                return None
            return self._locations[index]

    def has_locations(self) -> bool:
        with self._lock:
            return len(self._locations) > 0

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> StoreSnapshot:
        return StoreSnapshot(
            locations=self._locations,
            selected_index=self._selected_index,
            loading=self._loading,
            error=self._error,
        )

    # ------------------------------------------------------------------
    # Sequence + selection
    # ------------------------------------------------------------------

    def replace_all(self, locations: Iterable[LocationRecord]) -> None:
        """Replace the whole sequence, dropping a selection that no longer fits."""
        new_locations = tuple(locations)
        with self._lock:
            changes = {StoreChange.LOCATIONS}
            selected = revalidate(self._selected_index, len(new_locations))
            if selected != self._selected_index:
                _logger.debug(
                    "Selection %s out of range for %d locations, clearing",
                    self._selected_index,
                    len(new_locations),
                )
                changes.add(StoreChange.SELECTION)
            self._locations = new_locations
            self._selected_index = selected
            event = StoreEvent(changes=frozenset(changes), snapshot=self._snapshot_locked())
        self._notify(event)

    def select(self, index: int) -> None:
        """Select ``index``; an index outside the sequence clears the selection."""
        with self._lock:
            selected = resolve_selection(index, len(self._locations))
            if selected is None and index is not None:
                _logger.debug("Ignoring stale selection index %r (%d locations)", index, len(self._locations))
            event = self._set_selection_locked(selected)
        self._notify(event)

    def clear_selection(self) -> None:
        with self._lock:
            event = self._set_selection_locked(None)
        self._notify(event)

    def handle_marker_click(self, index: int) -> None:
        """Entry point for the map view."""
        self.select(index)

    def handle_sidebar_location_click(self, index: int) -> None:
        """Entry point for the sidebar list."""
        self.select(index)

    def _set_selection_locked(self, selected: int | None) -> StoreEvent | None:
        if selected == self._selected_index:
            return None
        self._selected_index = selected
        return StoreEvent(changes=frozenset({StoreChange.SELECTION}), snapshot=self._snapshot_locked())

    # ------------------------------------------------------------------
    # Ingestion lifecycle flags
    # ------------------------------------------------------------------

    def set_loading(self, loading: bool) -> None:
        with self._lock:
            loading = bool(loading)
            if loading == self._loading:
                return
            self._loading = loading
            event = StoreEvent(changes=frozenset({StoreChange.LOADING}), snapshot=self._snapshot_locked())
        self._notify(event)

    def set_error(self, message: str | None) -> None:
        with self._lock:
            if message == self._error:
                return
            self._error = message
            event = StoreEvent(changes=frozenset({StoreChange.ERROR}), snapshot=self._snapshot_locked())
        self._notify(event)

    def clear_error(self) -> None:
        self.set_error(None)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """Register ``observer`` for change events; returns an unsubscribe callable."""
        with self._lock:
            self._observers.append(observer)

        def _unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return _unsubscribe

    def _notify(self, event: StoreEvent | None) -> None:
        if event is None:
            return
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            try:
                observer(event)
            except Exception:
                _logger.debug("Store observer failed", exc_info=True)

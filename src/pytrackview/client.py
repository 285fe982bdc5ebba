"""High-level async client for the tracking service."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pytrackview._transport import HttpTransport, Transport
from pytrackview.config import TrackerConfig
from pytrackview.exceptions import TrackViewError
from pytrackview.ingestion.locations import FetchResult, fetch_locations
from pytrackview.state.store import SelectionStore

_logger = logging.getLogger(__name__)


class TrackViewClient:
    """Async client that loads the location history into a selection store.

    Usage::

        store = SelectionStore()
        async with TrackViewClient(config) as client:
            await client.refresh(store)
    """

    def __init__(
        self,
        config: TrackerConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TrackViewClient:
        if not self._external_transport:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    @property
    def config(self) -> TrackerConfig:
        return self._config

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise TrackViewError("Client not initialized. Use 'async with TrackViewClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    async def fetch_locations(self) -> FetchResult:
        """Fetch the filtered location history without touching any store."""
        return await fetch_locations(self._config, self._require_transport())

    async def refresh(self, store: SelectionStore) -> FetchResult:
        """Fetch locations and hand them to ``store``.

        Drives the store's loading and error flags. On failure the previous
        locations and selection are left as they were. When two refreshes
        overlap, the one that finishes last wins.
        """
        transport = self._require_transport()
        store.set_loading(True)
        store.clear_error()
        try:
            result = await fetch_locations(self._config, transport)
            if result.success:
                store.replace_all(result.locations)
            else:
                store.set_error(str(result.error))
        finally:
            store.set_loading(False)
        return result

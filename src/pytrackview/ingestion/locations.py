"""Coordinate history ingestion + parsing."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from pydantic import ValidationError

from pytrackview._transport import Transport
from pytrackview.config import TrackerConfig
from pytrackview.exceptions import IngestionError
from pytrackview.models.location import LocationRecord

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of one ingestion run.

    Exactly one of ``locations`` (possibly empty) or ``error`` is meaningful:
    a failed fetch carries no locations.
    """

    locations: tuple[LocationRecord, ...] = ()
    error: IngestionError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[LocationRecord, ...]:
        """Return the locations, re-raising the ingestion error on failure."""
        if self.error is not None:
            raise self.error
        return self.locations


def _coordinates(payload: Any) -> Sequence[Any]:
    if not isinstance(payload, dict):
        return ()
    coordinates = payload.get("coordinates")
    if not isinstance(coordinates, list):
        return ()
    return coordinates


def parse_coordinates(payload: Any, *, cutoff: date) -> list[LocationRecord]:
    """Extract the records observed on or after ``cutoff``.

    Order is preserved. Entries without a parseable ``DD-MM-YYYY`` date or
    without usable coordinates are dropped. A payload without a
    ``coordinates`` list yields an empty result.
    """
    coordinates = _coordinates(payload)
    records: list[LocationRecord] = []
    dropped = 0
    for entry in coordinates:
        try:
            record = LocationRecord.from_coordinate(entry)
        except ValidationError:
            dropped += 1
            _logger.debug("Dropping malformed coordinate entry", exc_info=True)
            continue
        if record.observed_on >= cutoff:
            records.append(record)

    _logger.debug(
        "Parsed coordinates: received=%d malformed=%d before_cutoff=%d",
        len(coordinates),
        dropped,
        len(coordinates) - dropped - len(records),
    )
    return records


async def fetch_locations(config: TrackerConfig, transport: Transport) -> FetchResult:
    """Fetch and filter the coordinate history of the configured vehicle.

    Never raises for upstream failures; they are returned in
    :attr:`FetchResult.error`.
    """
    endpoint = config.coords_endpoint
    try:
        payload = await transport.get_json(endpoint)
    except IngestionError as exc:
        _logger.warning("Fetching locations from %s failed: %s", endpoint, exc)
        return FetchResult(error=exc)

    records = parse_coordinates(payload, cutoff=config.cutoff_date)
    _logger.info(
        "Filtered coordinates: %d entries from %s onward",
        len(records),
        config.cutoff_date.isoformat(),
    )
    return FetchResult(locations=tuple(records))

"""Location record model."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pytrackview.ingestion.normalize import dig, parse_dmy_date, parse_time_of_day, safe_float

_LATITUDE_KEYS = ("latitude", "lat")
_LONGITUDE_KEYS = ("longitude", "lng", "lon")


def _first_present(entry: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = entry.get(key)
        if value is not None:
            return value
    return None


class LocationRecord(BaseModel):
    """One observed position of the tracked vehicle.

    Upstream coordinate objects go through :meth:`from_coordinate`, which
    reads the date from ``datetime.user.date`` (``DD-MM-YYYY``) and the optional
    time of day from ``datetime.user.time``. Other keys are kept only in ``raw``.

    Parameters
    ----------
    latitude : float
        Latitude in degrees.
    longitude : float
        Longitude in degrees.
    observed_on : date
        Calendar date of the observation.
    observed_time : time or None
        Time of day, when the source supplies one.
    raw : dict
        Coordinate object as received.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    observed_on: date
    observed_time: time | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_coordinate(cls, entry: Any) -> LocationRecord:
        """Build a record from one upstream coordinate object.

        Only the known keys are read; everything else stays in ``raw``.

        Raises
        ------
        pydantic.ValidationError
            The entry has no usable date or coordinates.
        """
        if not isinstance(entry, dict):
            return cls.model_validate(entry)
        return cls.model_validate(
            {
                "latitude": _first_present(entry, _LATITUDE_KEYS),
                "longitude": _first_present(entry, _LONGITUDE_KEYS),
                "observed_on": dig(entry, "datetime", "user", "date"),
                "observed_time": dig(entry, "datetime", "user", "time"),
                "raw": entry,
            }
        )

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("observed_on", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> date:
        parsed = parse_dmy_date(value)
        if parsed is None:
            raise ValueError(f"expected a DD-MM-YYYY date, got {value!r}")
        return parsed

    @field_validator("observed_time", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> time | None:
        return parse_time_of_day(value)

    @property
    def observed_at(self) -> datetime:
        """Observation timestamp; midnight when the time of day is unknown."""
        return datetime.combine(self.observed_on, self.observed_time or time.min)

    @property
    def user_date(self) -> str:
        """Observation date in the upstream ``DD-MM-YYYY`` convention."""
        return self.observed_on.strftime("%d-%m-%Y")

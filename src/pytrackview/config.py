"""Client configuration for pytrackview."""

from __future__ import annotations

import dataclasses
import os
from datetime import date
from typing import Any

from pytrackview._constants import BASE_URL, COORDS_PATH, DEFAULT_CUTOFF_DATE, DEFAULT_REQUEST_TIMEOUT
from pytrackview.exceptions import TrackViewConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_date(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise TrackViewConfigError(f"TRACKVIEW_CUTOFF_DATE must be YYYY-MM-DD, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class TrackerConfig:
    """Client configuration.

    Parameters
    ----------
    vehicle_id : str
        Identifier of the tracked vehicle on the upstream service.
    session_cookie : str
        Session credential sent verbatim as the ``Cookie`` header.
    base_url : str
        Tracking service base URL.
    coords_path : str
        Path template for the coordinates endpoint. ``{vehicle_id}`` is
        substituted.
    cutoff_date : date
        Inclusive lower bound; older records are dropped during ingestion.
    request_timeout : float
        Total seconds allowed for one upstream request.
    api_trace_enabled : bool
        Log redacted request headers and payload sizes at DEBUG.
    """

    vehicle_id: str
    session_cookie: str = ""
    base_url: str = BASE_URL
    coords_path: str = COORDS_PATH
    cutoff_date: date = DEFAULT_CUTOFF_DATE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        if not self.vehicle_id or not self.vehicle_id.strip():
            raise TrackViewConfigError("vehicle_id must be non-empty")
        if self.request_timeout <= 0:
            raise TrackViewConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @property
    def coords_endpoint(self) -> str:
        """Path of the per-vehicle coordinates endpoint."""
        return self.coords_path.format(vehicle_id=self.vehicle_id.strip())

    @classmethod
    def from_env(cls, **overrides: Any) -> TrackerConfig:
        """Create configuration from environment variables.

        Reads ``TRACKVIEW_VEHICLE_ID`` and the optional ``TRACKVIEW_*``
        variables below. Explicit keyword arguments override environment
        values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "TRACKVIEW_VEHICLE_ID": "vehicle_id",
            "TRACKVIEW_SESSION_COOKIE": "session_cookie",
            "TRACKVIEW_BASE_URL": "base_url",
            "TRACKVIEW_COORDS_PATH": "coords_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        cutoff_env = env.get("TRACKVIEW_CUTOFF_DATE")
        if cutoff_env is not None and "cutoff_date" not in overrides:
            config_kwargs["cutoff_date"] = _env_date(cutoff_env)

        timeout_env = env.get("TRACKVIEW_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise TrackViewConfigError(f"TRACKVIEW_REQUEST_TIMEOUT must be a number, got {timeout_env!r}") from exc

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(env.get("TRACKVIEW_API_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        if "vehicle_id" not in config_kwargs:
            raise TrackViewConfigError("TRACKVIEW_VEHICLE_ID is not set")
        return cls(**config_kwargs)

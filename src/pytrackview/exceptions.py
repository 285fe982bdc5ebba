"""Custom exception hierarchy for pytrackview."""

from __future__ import annotations


class TrackViewError(Exception):
    """Base exception for all pytrackview errors."""


class TrackViewConfigError(TrackViewError):
    """Invalid or missing configuration."""


class IngestionError(TrackViewError):
    """Fetching raw coordinates from the tracking service failed.

    Every ingestion failure is recoverable: the caller may retry or surface
    the message, and the selection store is left untouched.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class TransportError(IngestionError):
    """Network-level failure (DNS, timeout, connection reset, invalid JSON)."""


class UpstreamHttpError(IngestionError):
    """The tracking service answered with a non-2xx status."""

    def __init__(self, status: int, *, endpoint: str = "", body: str = "") -> None:
        self.status = status
        self.body = body
        message = f"HTTP {status} from {endpoint}" if endpoint else f"HTTP {status}"
        super().__init__(message, endpoint=endpoint)

    @property
    def is_retryable(self) -> bool:
        """Server-side and throttling failures are worth retrying."""
        return self.status >= 500 or self.status in (408, 429)

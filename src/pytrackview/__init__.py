"""pytrackview - Async location history and selection store for a tracked vehicle."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytrackview")
except PackageNotFoundError:
    __version__ = "0+local"
from pytrackview.client import TrackViewClient
from pytrackview.config import TrackerConfig
from pytrackview.exceptions import (
    IngestionError,
    TrackViewConfigError,
    TrackViewError,
    TransportError,
    UpstreamHttpError,
)
from pytrackview.formatting import format_date
from pytrackview.ingestion.locations import FetchResult, fetch_locations, parse_coordinates
from pytrackview.models import LocationRecord
from pytrackview.state.events import StoreChange, StoreEvent, StoreSnapshot
from pytrackview.state.store import SelectionStore

__all__ = [
    "__version__",
    "FetchResult",
    "IngestionError",
    "LocationRecord",
    "SelectionStore",
    "StoreChange",
    "StoreEvent",
    "StoreSnapshot",
    "TrackViewClient",
    "TrackViewConfigError",
    "TrackViewError",
    "TrackerConfig",
    "TransportError",
    "UpstreamHttpError",
    "fetch_locations",
    "format_date",
    "parse_coordinates",
]

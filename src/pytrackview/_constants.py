"""Internal constants shared across the library."""

from datetime import date

BASE_URL = "https://my.vanmoof.com"
COORDS_PATH = "/findmybike/coords/{vehicle_id}"
USER_AGENT = "pytrackview/0 (+aiohttp)"

#: Records observed before this date are discarded during ingestion.
DEFAULT_CUTOFF_DATE = date(2025, 8, 1)

#: Seconds before an upstream request is abandoned.
DEFAULT_REQUEST_TIMEOUT = 30.0

#: Upstream date fields are ``DD-MM-YYYY``.
DATE_SEPARATOR = "-"

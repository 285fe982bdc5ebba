"""HTTP transport for the tracking service."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from pytrackview._constants import USER_AGENT
from pytrackview._redact import redact_headers
from pytrackview.config import TrackerConfig
from pytrackview.exceptions import TransportError, UpstreamHttpError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the ingestion layer.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> Any:
        ...


class HttpTransport:
    """GET-only JSON transport that attaches the session cookie."""

    def __init__(self, config: TrackerConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
            "x-requested-with": "XMLHttpRequest",
        }
        if self._config.session_cookie:
            headers["cookie"] = self._config.session_cookie
        return headers

    async def get_json(self, endpoint: str) -> Any:
        """GET ``endpoint`` and return the decoded JSON body.

        Raises
        ------
        UpstreamHttpError
            The service answered with a non-2xx status.
        TransportError
            The request never completed or the body is not JSON.
        """
        url = f"{self._config.base_url.rstrip('/')}{endpoint}"
        headers = self._build_headers()

        if self._config.api_trace_enabled:
            _logger.debug("GET %s headers=%s", url, redact_headers(headers))
        else:
            _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise UpstreamHttpError(resp.status, endpoint=endpoint, body=text[:200])
        except UpstreamHttpError:
            raise
        except (TimeoutError, asyncio.TimeoutError) as exc:
            raise TransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"Request to {endpoint} failed: {exc}", endpoint=endpoint) from exc

        if self._config.api_trace_enabled:
            _logger.debug("GET %s -> %d (%d bytes)", url, resp.status, len(text))

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise TransportError(f"Invalid JSON from {endpoint}: {text[:200]}", endpoint=endpoint) from exc

"""Header redaction for request tracing.

Requests to the tracking service carry a session cookie that grants full
access to the account; it must never reach a log.
"""

from __future__ import annotations

from collections.abc import Mapping

_SENSITIVE_HEADERS: frozenset[str] = frozenset(
    {
        "authorization",
        "cookie",
        "set-cookie",
        "x-xsrf-token",
    }
)


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy ``headers`` with credential-bearing values masked."""
    return {
        name: "<redacted>" if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }

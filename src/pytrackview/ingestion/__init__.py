"""Ingestion layer.

This package fetches raw coordinate history from the tracking service and
emits cleaned, chronologically ordered location records. It never mutates the
selection store; callers hand the result to ``SelectionStore.replace_all``.
"""

__all__: list[str] = []

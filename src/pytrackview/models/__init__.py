"""Data models for tracking service responses."""

from pytrackview.models.location import LocationRecord

__all__ = [
    "LocationRecord",
]

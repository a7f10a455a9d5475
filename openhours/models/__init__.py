"""Data models for openhours."""

from openhours.models.schedule import Boundary, SplitResult, Weekday

__all__ = [
    "Boundary",
    "SplitResult",
    "Weekday",
]

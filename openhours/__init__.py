"""openhours: weekly opening-hours layouts, split into absolute boundaries."""

from openhours.models import Boundary, SplitResult, Weekday
from openhours.parser import InvalidLayoutError, Splitter, format_result, match, split

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "SplitResult",
    "Weekday",
    "InvalidLayoutError",
    "Splitter",
    "format_result",
    "match",
    "split",
]

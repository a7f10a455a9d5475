"""Layout parsing for openhours."""

from openhours.parser.formatting import format_boundaries, format_result
from openhours.parser.normalize import normalize_layout
from openhours.parser.splitter import (
    InvalidLayoutError,
    ScanState,
    Splitter,
    find_match_index,
    match,
    split,
)

__all__ = [
    "format_boundaries",
    "format_result",
    "normalize_layout",
    "InvalidLayoutError",
    "ScanState",
    "Splitter",
    "find_match_index",
    "match",
    "split",
]

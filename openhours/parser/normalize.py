"""Rewrites applied to a layout string before it is scanned."""

from __future__ import annotations

from openhours.models.constants import (
    ALWAYS_OPEN_EXPANSION,
    ALWAYS_OPEN_LAYOUT,
    DEFAULT_DAY_RANGE,
    TIME_SEPARATOR,
)
from openhours.parser.classifier import ends_with_weekday


def normalize_layout(layout: str) -> str:
    """Expand shorthands and add the full-day range where no time is given.

    - "" stays "" (nothing to parse, not an error)
    - "24/7" becomes "Mo-Su 00:00-23:59"
    - "Mo-Fr" becomes "Mo-Fr 00:00-23:59"
    - "Mo 08:00-12:00; Sa-Su" becomes "Mo 08:00-12:00; Sa-Su 00:00-23:59"
    """
    text = (layout or "").rstrip()
    if not text:
        return text

    if text == ALWAYS_OPEN_LAYOUT:
        return ALWAYS_OPEN_EXPANSION

    if TIME_SEPARATOR not in text or ends_with_weekday(text):
        return f"{text} {DEFAULT_DAY_RANGE}"

    return text

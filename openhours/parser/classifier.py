"""Character classification for the layout scanner."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from openhours.models.constants import RANGE_INDICATOR
from openhours.models.schedule import Weekday


class CharClass(str, Enum):
    DIGIT = "digit"
    LETTER = "letter"
    RANGE = "range"
    OTHER = "other"


# Two-letter weekday tokens, matched case-insensitively.
_WEEKDAY_TOKENS: dict[str, Weekday] = {
    "mo": Weekday.MO,
    "tu": Weekday.TU,
    "we": Weekday.WE,
    "th": Weekday.TH,
    "fr": Weekday.FR,
    "sa": Weekday.SA,
    "su": Weekday.SU,
}


def classify(ch: str) -> CharClass:
    # isdecimal() rather than isdigit(): superscripts are digits but not int()-able
    if ch.isdecimal():
        return CharClass.DIGIT
    if ch.isalpha():
        return CharClass.LETTER
    if ch == RANGE_INDICATOR:
        return CharClass.RANGE
    return CharClass.OTHER


def lookup_weekday(first: str, second: str) -> Optional[int]:
    """Return the ISO weekday (1-7) for a two-letter token, or None if it is not one."""
    day = _WEEKDAY_TOKENS.get((first + second).lower())
    if day is None:
        return None
    return day.iso


def ends_with_weekday(text: str) -> bool:
    """True if the last two significant characters of text form a weekday token."""
    stripped = text.rstrip()
    if len(stripped) < 2:
        return False
    return lookup_weekday(stripped[-2], stripped[-1]) is not None

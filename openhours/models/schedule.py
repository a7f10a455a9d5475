"""Schedule models for openhours.

A parsed layout is a flat, chronologically sorted list of boundaries for the
week containing the reference instant. Boundaries come in opening/closing
pairs; only closing boundaries carry the instant of the opening they close.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Weekday(str, Enum):
    MO = "mo"
    TU = "tu"
    WE = "we"
    TH = "th"
    FR = "fr"
    SA = "sa"
    SU = "su"

    @property
    def iso(self) -> int:
        """ISO weekday number (Monday=1 ... Sunday=7)."""
        return _ISO_ORDER.index(self) + 1

    @classmethod
    def from_iso(cls, number: int) -> "Weekday":
        return _ISO_ORDER[number - 1]


_ISO_ORDER: List[Weekday] = [
    Weekday.MO,
    Weekday.TU,
    Weekday.WE,
    Weekday.TH,
    Weekday.FR,
    Weekday.SA,
    Weekday.SU,
]


class Boundary(BaseModel):
    """A single opening or closing edge of an interval."""

    instant: datetime = Field(..., description="Absolute time of the edge")
    weekday: Weekday = Field(..., description="Weekday the edge was emitted for")
    closing: bool = Field(False, description="True if this edge ends an interval")
    opened_at: Optional[datetime] = Field(
        None, description="For closing edges: instant of the paired opening edge"
    )


class SplitResult(BaseModel):
    """Outcome of splitting a layout string against a reference instant."""

    reference: datetime
    boundaries: List[Boundary] = Field(default_factory=list)
    matched: bool = False
    match_index: Optional[int] = Field(
        None, description="Index of the closing boundary that proves the reference open"
    )

    @property
    def instants(self) -> List[datetime]:
        return [b.instant for b in self.boundaries]

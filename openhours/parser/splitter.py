"""Layout splitter for openhours.

Turns an opening-hours layout string ("Mo-Fr 08:00-12:00 14:00-18:00; Sa 10:00-14:00")
into the absolute boundaries it describes for the week containing a reference
instant, and decides whether that instant falls inside one of the intervals.

The scan is a single permissive pass: anything that is not a digit, a
two-letter weekday token or a range indicator is skipped. The only error is
an odd number of boundaries at the end of the scan.
"""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta
from enum import Enum
from typing import Dict, List, Optional

from openhours.models.constants import (
    DEFAULT_DAY_RANGE,
    END_OF_DAY_HOUR,
    END_OF_DAY_MINUTE,
)
from openhours.models.schedule import Boundary, SplitResult, Weekday
from openhours.parser.buffers import TokenBuffers
from openhours.parser.classifier import CharClass, classify, lookup_weekday
from openhours.parser.formatting import format_boundaries
from openhours.parser.normalize import normalize_layout

logger = logging.getLogger(__name__)


class InvalidLayoutError(ValueError):
    """Raised when a layout produces an opening boundary with no matching close."""

    def __init__(self, layout: str, *, boundary_count: int):
        super().__init__(f"openhours: invalid input layout string {layout!r}")
        self.layout = layout
        self.boundary_count = boundary_count


class ScanState(str, Enum):
    """Scanner states.

    IDLE              nothing buffered since the last reset
    IN_DAY_GROUP      weekdays are accumulating
    IN_SPAN           a range indicator was seen while collecting weekdays
    AWAITING_WEEKDAY  boundaries were just emitted
    AWAITING_TIME     a range indicator followed an emission; next time closes it
    """

    IDLE = "idle"
    IN_DAY_GROUP = "in_day_group"
    IN_SPAN = "in_span"
    AWAITING_WEEKDAY = "awaiting_weekday"
    AWAITING_TIME = "awaiting_time"

    @property
    def spanning(self) -> bool:
        return self in (ScanState.IN_SPAN, ScanState.AWAITING_TIME)

    @property
    def after_emit(self) -> bool:
        return self in (ScanState.AWAITING_WEEKDAY, ScanState.AWAITING_TIME)


def _closing_end(boundary: Boundary) -> datetime:
    # A 23:59 close means "until end of day": its last minute is still open.
    t = boundary.instant
    if (t.hour, t.minute) == (END_OF_DAY_HOUR, END_OF_DAY_MINUTE):
        return t + timedelta(minutes=1)
    return t


def find_match_index(boundaries: List[Boundary], reference: datetime) -> Optional[int]:
    """Index of the first closing boundary whose interval contains reference.

    The interval must be on the reference's weekday and satisfy
    opened_at <= reference < close. Boundaries must already be sorted.
    """
    weekday = reference.isoweekday()
    for i, b in enumerate(boundaries):
        if not b.closing or b.opened_at is None:
            continue
        if b.weekday.iso != weekday:
            continue
        if b.opened_at <= reference < _closing_end(b):
            return i
    return None


class Splitter:
    """Reusable parser bound to one reference instant.

    Buffers and the output list are reset at the start of every call to
    split() or match(). An instance must not be shared between threads
    without external locking; use the module-level split()/match() helpers
    for one-off calls.
    """

    def __init__(self, reference: datetime):
        self.reference = reference
        self._ref_date = reference.date()
        self._ref_weekday = reference.isoweekday()
        self._tz = reference.tzinfo

        self._buffers = TokenBuffers()
        self._output: List[Boundary] = []
        self._open_edges: Dict[int, datetime] = {}
        self._state = ScanState.IDLE
        self._match_index: Optional[int] = None

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def match_index(self) -> Optional[int]:
        return self._match_index

    def _reset(self) -> None:
        self._buffers.reset()
        self._output = []
        self._open_edges.clear()
        self._state = ScanState.IDLE
        self._match_index = None

    def _instant(self, day: int, hour: int, minute: int) -> datetime:
        date = self._ref_date + timedelta(days=day - self._ref_weekday)
        # timedelta addition rolls 24:30 or 25:00 into the next day instead of raising
        midnight = datetime.combine(date, time(0, 0), tzinfo=self._tz)
        return midnight + timedelta(hours=hour, minutes=minute)

    def _emit(self, day: int, hour: int, minute: int, closing: bool) -> None:
        if closing and ((hour == 0 and minute == 0) or hour == 24):
            hour, minute = END_OF_DAY_HOUR, END_OF_DAY_MINUTE

        instant = self._instant(day, hour, minute)
        opened_at = None
        if closing:
            opened_at = self._open_edges.pop(day, None)
        else:
            self._open_edges[day] = instant

        self._output.append(
            Boundary(
                instant=instant,
                weekday=Weekday.from_iso(day),
                closing=closing,
                opened_at=opened_at,
            )
        )

    def _emit_pending(self, hour: int, minute: int, closing: bool) -> None:
        for day in self._buffers.days:
            self._emit(day, hour, minute, closing)

    def _on_digit(self, ch: str) -> None:
        parsed = self._buffers.push_digit(ch)
        if parsed is None:
            return
        hour, minute = parsed
        self._emit_pending(hour, minute, closing=self._state.spanning)
        self._state = ScanState.AWAITING_WEEKDAY

    def _on_weekday(self, day: int) -> None:
        if self._state.after_emit:
            # A weekday after a time starts a new group; keep a pending range indicator
            self._buffers.days.clear()
            self._state = ScanState.IN_SPAN if self._state.spanning else ScanState.IN_DAY_GROUP

        days = self._buffers.days
        if self._state is ScanState.IN_SPAN and days and days[-1] < day:
            self._buffers.expand_days_to(day)
            self._state = ScanState.IN_DAY_GROUP
            return

        self._buffers.add_day(day)
        if self._state is ScanState.IDLE:
            self._state = ScanState.IN_DAY_GROUP

    def _on_range(self) -> None:
        if self._state.after_emit:
            self._state = ScanState.AWAITING_TIME
        else:
            self._state = ScanState.IN_SPAN

    def _on_end(self) -> None:
        pending = self._state in (ScanState.IN_DAY_GROUP, ScanState.IN_SPAN)
        if pending and self._buffers.days:
            logger.debug(f"Weekdays {self._buffers.days} have no time; using {DEFAULT_DAY_RANGE}")
            self._emit_pending(0, 0, closing=False)
            self._emit_pending(END_OF_DAY_HOUR, END_OF_DAY_MINUTE, closing=True)

    def _parse(self, layout: str) -> None:
        self._reset()

        chars = iter(normalize_layout(layout))
        for ch in chars:
            kind = classify(ch)
            if kind is CharClass.DIGIT:
                self._on_digit(ch)
            elif kind is CharClass.LETTER:
                # Weekday tokens are two letters; the lookahead is always consumed
                nxt = next(chars, None)
                if nxt is None:
                    break
                day = lookup_weekday(ch, nxt)
                if day is not None:
                    self._on_weekday(day)
            elif kind is CharClass.RANGE:
                self._on_range()

        self._on_end()

        if len(self._output) % 2 != 0:
            logger.warning(f"Invalid layout {layout!r}: {len(self._output)} boundaries")
            raise InvalidLayoutError(layout, boundary_count=len(self._output))

        self._output.sort(key=lambda b: b.instant)
        self._match_index = find_match_index(self._output, self.reference)
        logger.debug(
            f"Parsed layout {layout!r}: {len(self._output)} boundaries, "
            f"match_index={self._match_index}"
        )

    def split(self, layout: str) -> SplitResult:
        """Split layout into sorted boundaries and report whether the reference is open."""
        self._parse(layout)
        return SplitResult(
            reference=self.reference,
            boundaries=list(self._output),
            matched=self._match_index is not None,
            match_index=self._match_index,
        )

    def match(self, layout: str) -> bool:
        """Same decision as split(layout).matched, without copying the boundaries out."""
        self._parse(layout)
        return self._match_index is not None

    def format(self) -> str:
        """Render the boundaries of the last parse, one line per day."""
        return format_boundaries(self._output, self._match_index)


def split(layout: str, reference: datetime) -> SplitResult:
    return Splitter(reference).split(layout)


def match(layout: str, reference: datetime) -> bool:
    return Splitter(reference).match(layout)

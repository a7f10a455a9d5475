"""Token buffers used while scanning a layout string.

The buffers are scratch space owned by a single Splitter and rewritten on
every parse. Nothing here is thread-safe.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from openhours.models.constants import DIGITS_PER_FIELD


class TokenBuffers:
    """Pending weekdays plus the HH and MM digit fragments of the current time."""

    def __init__(self):
        self.days: List[int] = []
        self.hour: List[str] = []
        self.minute: List[str] = []

    def reset(self) -> None:
        self.days.clear()
        self.clear_time()

    def clear_time(self) -> None:
        self.hour.clear()
        self.minute.clear()

    def add_day(self, day: int) -> None:
        # Keeps the buffer bounded by the seven weekdays
        if day not in self.days:
            self.days.append(day)

    def expand_days_to(self, day: int) -> None:
        """Append every weekday after the last buffered one up to and including day."""
        for d in range(self.days[-1] + 1, day + 1):
            self.add_day(d)

    def push_digit(self, ch: str) -> Optional[Tuple[int, int]]:
        """Feed one digit; return (hour, minute) once both fields are complete."""
        if len(self.hour) < DIGITS_PER_FIELD:
            self.hour.append(ch)
            return None

        self.minute.append(ch)
        if len(self.minute) < DIGITS_PER_FIELD:
            return None

        parsed = (int("".join(self.hour)), int("".join(self.minute)))
        self.clear_time()
        return parsed

    @property
    def has_partial_time(self) -> bool:
        return bool(self.hour or self.minute)

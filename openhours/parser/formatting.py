"""Human-readable rendering of split results.

One line per calendar day, for example:

    Mon, 07 Nov 08:00-12:00 14:00-17:00
    Sun, 13 Nov 00:00*23:59

A closing time is prefixed with "-", or with "*" when it closes the interval
the reference instant falls in.
"""

from __future__ import annotations

from typing import List, Optional

from openhours.models.schedule import Boundary, SplitResult

DAY_FORMAT = "%a, %d %b"
TIME_FORMAT = "%H:%M"


def format_boundaries(boundaries: List[Boundary], match_index: Optional[int] = None) -> str:
    if not boundaries:
        return ""

    lines: List[str] = []
    current: List[str] = []
    day = None

    for i, b in enumerate(boundaries):
        clock = b.instant.strftime(TIME_FORMAT)
        if b.instant.date() != day:
            if current:
                lines.append("".join(current))
            current = [b.instant.strftime(DAY_FORMAT), " ", clock]
            day = b.instant.date()
            continue

        if b.closing:
            current.append("*" if i == match_index else "-")
        else:
            current.append(" ")
        current.append(clock)

    lines.append("".join(current))
    return "\n".join(lines)


def format_result(result: SplitResult) -> str:
    return format_boundaries(result.boundaries, result.match_index)

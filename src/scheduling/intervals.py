"""
Time intervals within a single day.

Intervals are held as minutes since midnight. The "HH:MM-HH:MM" string form
only exists at the edges: it is parsed on the way in and formatted on the
way out.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60

_INTERVAL_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})\s*$")


class IntervalFormatError(ValueError):
    """Raised for interval strings that are not a valid "HH:MM-HH:MM" range."""


@dataclass(frozen=True, order=True)
class TimeInterval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end <= MINUTES_PER_DAY:
            raise IntervalFormatError(
                f"invalid interval {self.start}-{self.end} (minutes of day)"
            )

    @property
    def minutes(self) -> int:
        return self.end - self.start

    @property
    def label(self) -> str:
        return f"{format_clock(self.start)}-{format_clock(self.end)}"

    def contains(self, start: int, end: int) -> bool:
        return self.start <= start and end <= self.end

    def overlaps(self, other: "TimeInterval") -> bool:
        return self.start < other.end and other.start < self.end


def _clock_minutes(hours: str, minutes: str, raw: str) -> int:
    h, m = int(hours), int(minutes)
    if not (0 <= h < 24 and 0 <= m < 60):
        raise IntervalFormatError(f"invalid time in interval {raw!r}")
    return h * 60 + m


def parse_interval(raw: str) -> TimeInterval:
    """Parse "HH:MM-HH:MM" into a TimeInterval. Raises IntervalFormatError."""
    if not isinstance(raw, str):
        raise IntervalFormatError(f"interval must be a string, got {type(raw).__name__}")

    match = _INTERVAL_RE.match(raw)
    if match is None:
        raise IntervalFormatError(f"malformed interval {raw!r}, expected HH:MM-HH:MM")

    start = _clock_minutes(match.group(1), match.group(2), raw)
    end = _clock_minutes(match.group(3), match.group(4), raw)
    if start >= end:
        raise IntervalFormatError(f"interval {raw!r} must start before it ends")
    return TimeInterval(start, end)


def format_clock(minutes: int) -> str:
    """800 minutes -> "13:20"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def to_hhmm(minutes: int) -> int:
    """Clock integer form used on the wire: 14:30 -> 1430."""
    return (minutes // 60) * 100 + minutes % 60

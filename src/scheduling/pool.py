from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping

from scheduling.intervals import TimeInterval, parse_interval

# Remainders shorter than this are too small to hold a task and are dropped.
MIN_REMAINDER_MIN = 60


def _normalize(intervals: Iterable[TimeInterval]) -> List[TimeInterval]:
    """Sort by start and merge strictly overlapping intervals."""
    out: List[TimeInterval] = []
    for interval in sorted(intervals):
        if out and out[-1].overlaps(interval):
            last = out.pop()
            interval = TimeInterval(last.start, max(last.end, interval.end))
        out.append(interval)
    return out


class AvailabilityPool:
    """
    Remaining free time for one scheduling run, keyed by day.

    Built from fresh parses of the caller's strings, so the caller's map is
    never touched. Within a day, intervals are kept sorted and disjoint.
    """

    def __init__(self, slots_by_day: Mapping[str, Iterable[TimeInterval]]):
        self._slots: Dict[str, List[TimeInterval]] = {
            day: _normalize(slots) for day, slots in slots_by_day.items()
        }

    @classmethod
    def from_strings(cls, availability: Mapping[str, Iterable[str]]) -> "AvailabilityPool":
        return cls(
            {day: [parse_interval(s) for s in (slots or [])] for day, slots in availability.items()}
        )

    def days(self) -> Iterator[str]:
        return iter(list(self._slots))

    def slots(self, day: str) -> List[TimeInterval]:
        return list(self._slots.get(day, []))

    def is_empty(self) -> bool:
        return not any(self._slots.values())

    def commit(self, day: str, original: TimeInterval, placed_start: int, placed_end: int) -> None:
        """Carve [placed_start, placed_end) out of ``original`` on ``day``."""
        day_slots = self._slots[day]
        day_slots.remove(original)

        if placed_start - original.start >= MIN_REMAINDER_MIN:
            day_slots.append(TimeInterval(original.start, placed_start))
        if original.end - placed_end >= MIN_REMAINDER_MIN:
            day_slots.append(TimeInterval(placed_end, original.end))

        day_slots.sort()

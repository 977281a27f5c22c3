from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from scheduling.intervals import TimeInterval, parse_interval

PowerWindows = Dict[str, List[TimeInterval]]

# Preferred start windows per energy level, [start, end) in minutes of day.
ENERGY_WINDOWS: Dict[str, Sequence[tuple]] = {
    "high": ((8 * 60, 12 * 60), (18 * 60, 20 * 60)),
    "medium": ((12 * 60, 18 * 60),),
}


def parse_power_map(power: Optional[Mapping[str, Iterable[str]]]) -> PowerWindows:
    if not power:
        return {}
    return {day: [parse_interval(s) for s in (windows or [])] for day, windows in power.items()}


def power_available(day_windows: Optional[Sequence[TimeInterval]], start: int, end: int) -> bool:
    """No windows for the day means power is assumed to be always on."""
    if not day_windows:
        return True
    return any(w.contains(start, end) for w in day_windows)


def energy_compatible(start: int, energy_level: Optional[str]) -> bool:
    windows = ENERGY_WINDOWS.get(energy_level or "")
    if windows is None:
        # low, or anything we don't recognize
        return True
    return any(lo <= start < hi for lo, hi in windows)

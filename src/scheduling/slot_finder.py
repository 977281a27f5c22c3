from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from planner_ai.models import Task
from scheduling.intervals import TimeInterval
from scheduling.pool import AvailabilityPool
from scheduling.predicates import PowerWindows, energy_compatible, power_available


@dataclass(frozen=True)
class PlacementPass:
    """One scan over the pool. Passes differ only in which checks they apply."""

    name: str
    match_energy: bool


OPTIMAL = PlacementPass("optimal", match_energy=True)
FALLBACK = PlacementPass("fallback", match_energy=False)
DEFAULT_PASSES: Sequence[PlacementPass] = (OPTIMAL, FALLBACK)


@dataclass(frozen=True)
class Candidate:
    day: str
    slot: TimeInterval
    start: int
    end: int
    placement: str


def find_slot(
    pool: AvailabilityPool,
    power: PowerWindows,
    task: Task,
    minutes: int,
    placement_pass: PlacementPass,
) -> Optional[Candidate]:
    """First-fit scan: the first day/slot satisfying the pass wins."""
    for day in pool.days():
        day_power = power.get(day)
        for slot in pool.slots(day):
            if slot.minutes < minutes:
                continue

            start, end = slot.start, slot.start + minutes
            if not power_available(day_power, start, end):
                continue
            if placement_pass.match_energy and not energy_compatible(start, task.energy_level):
                continue

            return Candidate(day=day, slot=slot, start=start, end=end, placement=placement_pass.name)
    return None


def find_placement(
    pool: AvailabilityPool,
    power: PowerWindows,
    task: Task,
    minutes: int,
    passes: Sequence[PlacementPass] = DEFAULT_PASSES,
) -> Optional[Candidate]:
    for placement_pass in passes:
        candidate = find_slot(pool, power, task, minutes, placement_pass)
        if candidate is not None:
            return candidate
    return None

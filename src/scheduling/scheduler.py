from __future__ import annotations

import logging
import math
from typing import Iterable, List, Mapping, Optional, Sequence

from planner_ai.models import Assignment, Task
from scheduling.intervals import MINUTES_PER_DAY, format_clock, to_hhmm
from scheduling.ordering import order_tasks
from scheduling.pool import AvailabilityPool
from scheduling.predicates import parse_power_map
from scheduling.slot_finder import DEFAULT_PASSES, Candidate, PlacementPass, find_placement

logger = logging.getLogger(__name__)

DayMap = Mapping[str, Iterable[str]]


def task_minutes(task: Task) -> int:
    """Estimated effort in whole minutes, rounded down (never below one minute).

    Anything longer than a day is capped just past a day; no slot can hold it.
    """
    # round() first so 0.7h is 42 minutes, not 41.999...
    minutes = min(task.estimated_hours * 60, MINUTES_PER_DAY + 1)
    return max(1, math.floor(round(minutes, 6)))


def _assignment(task: Task, candidate: Candidate) -> Assignment:
    return Assignment(
        task=task.title,
        task_id=task.id,
        day=candidate.day,
        start_time=to_hhmm(candidate.start),
        end_time=to_hhmm(candidate.end),
        scheduled=f"{candidate.day} {format_clock(candidate.start)}-{format_clock(candidate.end)}",
        deadline=task.deadline,
        priority=task.priority,
        energy_level=task.energy_level,
        duration=task.estimated_hours,
        placement=candidate.placement,
    )


class Scheduler:
    """Greedy first-fit placement of tasks into free time, respecting power windows."""

    def __init__(self, passes: Sequence[PlacementPass] = DEFAULT_PASSES):
        self.passes = tuple(passes)

    def schedule(
        self,
        tasks: Iterable[Task],
        availability: Optional[DayMap] = None,
        power: Optional[DayMap] = None,
    ) -> List[Assignment]:
        # Parse everything up front so malformed input fails before any placement.
        power_windows = parse_power_map(power)
        pool = AvailabilityPool.from_strings(availability or {})

        ordered = order_tasks(tasks)
        if not ordered or pool.is_empty():
            return []

        assignments: List[Assignment] = []
        for task in ordered:
            minutes = task_minutes(task)
            candidate = find_placement(pool, power_windows, task, minutes, self.passes)
            if candidate is None:
                logger.debug(f"No slot for task {task.title!r} ({minutes} min)")
                continue

            pool.commit(candidate.day, candidate.slot, candidate.start, candidate.end)
            assignments.append(_assignment(task, candidate))

        logger.info(
            f"Scheduled {len(assignments)} of {len(ordered)} tasks "
            f"({len(ordered) - len(assignments)} unplaced)"
        )
        return assignments


def schedule(
    tasks: Iterable[Task],
    availability: Optional[DayMap] = None,
    power: Optional[DayMap] = None,
) -> List[Assignment]:
    return Scheduler().schedule(tasks, availability, power)

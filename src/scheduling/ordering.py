from __future__ import annotations

from datetime import date
from typing import Iterable, List

from planner_ai.models import Task, priority_rank


def _sort_key(task: Task):
    # Undated tasks go after dated ones with the same priority.
    return (-priority_rank(task.priority), task.deadline or date.max)


def order_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Incomplete tasks, highest priority first, then earliest deadline.

    ``sorted`` is stable, so remaining ties keep their input order.
    """
    return sorted((t for t in tasks if not t.completed), key=_sort_key)

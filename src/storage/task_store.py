"""
Task storage.

PostgresTaskStore is used when a database is configured; InMemoryTaskStore
keeps the service usable (and testable) without one. Both expose the same
async interface.
"""

import logging
from typing import Dict, List, Optional

from planner_ai.models import Task, TaskCreate, TaskUpdate
from storage import db

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, deadline, priority, estimated_hours, type, energy_level, completed"


def _task_from_record(record) -> Task:
    return Task(**{k: record[k] for k in _COLUMNS.split(", ")})


class PostgresTaskStore:
    async def list_tasks(self) -> List[Task]:
        rows = await db.fetch(f"SELECT {_COLUMNS} FROM tasks ORDER BY created_at DESC, id DESC")
        return [_task_from_record(r) for r in rows]

    async def list_incomplete(self) -> List[Task]:
        rows = await db.fetch(f"SELECT {_COLUMNS} FROM tasks WHERE completed = FALSE ORDER BY id")
        return [_task_from_record(r) for r in rows]

    async def get(self, task_id: int) -> Optional[Task]:
        row = await db.fetchrow(f"SELECT {_COLUMNS} FROM tasks WHERE id = $1", task_id)
        return _task_from_record(row) if row else None

    async def create(self, payload: TaskCreate) -> Task:
        row = await db.fetchrow(
            f"""
            INSERT INTO tasks (title, deadline, priority, estimated_hours, type, energy_level)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {_COLUMNS}
            """,
            payload.title,
            payload.deadline,
            payload.priority,
            payload.estimated_hours,
            payload.type,
            payload.energy_level,
        )
        task = _task_from_record(row)
        logger.info(f"Created task {task.id} ({task.title!r})")
        return task

    async def update(self, task_id: int, payload: TaskUpdate) -> Optional[Task]:
        row = await db.fetchrow(
            f"""
            UPDATE tasks
               SET title = $1, deadline = $2, priority = $3, estimated_hours = $4,
                   type = $5, energy_level = $6, completed = $7
             WHERE id = $8
            RETURNING {_COLUMNS}
            """,
            payload.title,
            payload.deadline,
            payload.priority,
            payload.estimated_hours,
            payload.type,
            payload.energy_level,
            payload.completed,
            task_id,
        )
        return _task_from_record(row) if row else None

    async def delete(self, task_id: int) -> bool:
        status = await db.execute("DELETE FROM tasks WHERE id = $1", task_id)
        # asyncpg returns the command tag, e.g. "DELETE 1"
        return status.endswith(" 1")

    async def mark_completed(self, task_id: int) -> bool:
        status = await db.execute("UPDATE tasks SET completed = TRUE WHERE id = $1", task_id)
        return status.endswith(" 1")


class InMemoryTaskStore:
    """Process-local store. Methods never await, so each call runs uninterrupted."""

    def __init__(self) -> None:
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1

    async def list_tasks(self) -> List[Task]:
        return sorted(self._tasks.values(), key=lambda t: t.id, reverse=True)

    async def list_incomplete(self) -> List[Task]:
        return [t for t in sorted(self._tasks.values(), key=lambda t: t.id) if not t.completed]

    async def get(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def create(self, payload: TaskCreate) -> Task:
        task = Task(id=self._next_id, **payload.model_dump())
        self._tasks[task.id] = task
        self._next_id += 1
        logger.info(f"Created task {task.id} ({task.title!r})")
        return task

    async def update(self, task_id: int, payload: TaskUpdate) -> Optional[Task]:
        if task_id not in self._tasks:
            return None
        task = Task(id=task_id, **payload.model_dump())
        self._tasks[task_id] = task
        return task

    async def delete(self, task_id: int) -> bool:
        return self._tasks.pop(task_id, None) is not None

    async def mark_completed(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        if task is None:
            return False
        self._tasks[task_id] = task.model_copy(update={"completed": True})
        return True


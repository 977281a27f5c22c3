import logging
from typing import Any, Awaitable, Dict, List, TypeVar

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from api.dependencies import get_task_store
from planner_ai.models import Task, TaskCreate, TaskUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_store(action: str, pending: Awaitable[T]) -> T:
    """Await a store call, turning backend failures into a logged 500."""
    try:
        return await pending
    except Exception as e:
        logger.error(f"Error {action}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


def _invalid(e: ValidationError) -> HTTPException:
    return HTTPException(status_code=400, detail=f"Invalid task: {e.errors()[0]['msg']}")


@router.get("/tasks")
async def list_tasks(store=Depends(get_task_store)) -> List[Task]:
    """All tasks, newest first."""
    return await call_store("fetching tasks", store.list_tasks())


@router.post("/tasks", status_code=201)
async def create_task(
    payload: Dict[str, Any] = Body(...),
    store=Depends(get_task_store),
) -> Task:
    logger.info(f"Adding task: {payload}")

    if not payload.get("title") or not payload.get("deadline"):
        raise HTTPException(status_code=400, detail="Title and deadline are required")

    try:
        task_in = TaskCreate.model_validate(payload)
    except ValidationError as e:
        raise _invalid(e)

    return await call_store("adding task", store.create(task_in))


@router.put("/tasks/{task_id}")
async def update_task(
    task_id: int,
    payload: Dict[str, Any] = Body(...),
    store=Depends(get_task_store),
) -> Task:
    try:
        task_in = TaskUpdate.model_validate(payload)
    except ValidationError as e:
        raise _invalid(e)

    task = await call_store("updating task", store.update(task_id, task_in))
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: int, store=Depends(get_task_store)) -> dict:
    if not await call_store("deleting task", store.delete(task_id)):
        raise HTTPException(status_code=404, detail="Task not found")
    return {"message": "Task deleted successfully"}


@router.patch("/tasks/{task_id}/complete")
async def complete_task(task_id: int, store=Depends(get_task_store)) -> dict:
    if not await call_store("completing task", store.mark_completed(task_id)):
        raise HTTPException(status_code=404, detail="Task not found")
    return {"message": "Task marked as completed"}

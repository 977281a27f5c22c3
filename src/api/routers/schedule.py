import logging
import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_scheduler, get_task_store
from api.metrics import (
    REQUESTS_TOTAL,
    REQUEST_LATENCY_SECONDS,
    SCHEDULE_RUNS_TOTAL,
    TASKS_SCHEDULED_TOTAL,
    TASKS_UNPLACED_TOTAL,
)
from api.routers.tasks import call_store
from planner_ai.models import Assignment, ScheduleRequest
from scheduling.intervals import IntervalFormatError
from scheduling.scheduler import Scheduler

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/generate-schedule")
async def generate_schedule(
    payload: ScheduleRequest,
    store=Depends(get_task_store),
    scheduler: Scheduler = Depends(get_scheduler),
) -> List[Assignment]:
    """
    Fit every incomplete task into the caller's free time.

    Tasks that don't fit anywhere are left out of the result.
    """
    start = time.time()
    logger.info(
        f"Generating schedule for {len(payload.availability)} day(s), "
        f"power windows on {len(payload.power)} day(s)"
    )

    tasks = await call_store("fetching incomplete tasks", store.list_incomplete())

    try:
        assignments = scheduler.schedule(tasks, payload.availability, payload.power)
    except IntervalFormatError as e:
        REQUESTS_TOTAL.labels(endpoint="/generate-schedule", status="invalid").inc()
        raise HTTPException(status_code=400, detail=str(e))

    SCHEDULE_RUNS_TOTAL.inc()
    TASKS_SCHEDULED_TOTAL.inc(len(assignments))
    TASKS_UNPLACED_TOTAL.inc(len(tasks) - len(assignments))
    REQUESTS_TOTAL.labels(endpoint="/generate-schedule", status="ok").inc()
    REQUEST_LATENCY_SECONDS.labels(endpoint="/generate-schedule").observe(time.time() - start)

    return assignments

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api.dependencies import get_task_store
from storage import db
from storage.task_store import PostgresTaskStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/test")
async def test_endpoint() -> dict:
    return {"message": "Backend is working!"}


@router.get("/health")
async def health_check(store=Depends(get_task_store)) -> dict:
    """Health check endpoint for container orchestration."""
    uses_database = isinstance(store, PostgresTaskStore)
    health = {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "store": "postgres" if uses_database else "in-memory",
    }

    if uses_database:
        db_health = await db.stats()
        health["database"] = db_health
        if db_health["status"] != "healthy":
            health["status"] = "degraded"

    return health


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus scrape endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

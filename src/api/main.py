import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import state
from api.dependencies import USE_DATABASE
from api.routers import ops, schedule, tasks, weather
from storage import db
from storage.task_store import PostgresTaskStore

# Logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if o.strip()
]

app = FastAPI(title="Neural Planner")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks.router, prefix="/api")
app.include_router(schedule.router, prefix="/api")
app.include_router(weather.router, prefix="/api")
app.include_router(ops.router, prefix="/api")


@app.on_event("startup")
async def startup() -> None:
    if not USE_DATABASE:
        logger.info("USE_DATABASE is off, keeping tasks in memory")
        return

    await db.open_pool()
    state.task_store = PostgresTaskStore()
    logger.info("Task store backed by PostgreSQL")


@app.on_event("shutdown")
async def shutdown() -> None:
    await db.close_pool()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "5000")))

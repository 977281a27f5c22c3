from datetime import date

import pytest
from fastapi.testclient import TestClient

from api import state
from planner_ai.models import Task
from storage.task_store import InMemoryTaskStore


@pytest.fixture
def make_task():
    counter = {"id": 0}

    def _make(title: str, **fields) -> Task:
        counter["id"] += 1
        fields.setdefault("id", counter["id"])
        fields.setdefault("deadline", date(2026, 10, 20))
        return Task(title=title, **fields)

    return _make


@pytest.fixture
def store(monkeypatch):
    fresh = InMemoryTaskStore()
    monkeypatch.setattr(state, "task_store", fresh, raising=True)
    return fresh


@pytest.fixture
def client(store):
    from api.main import app

    return TestClient(app)

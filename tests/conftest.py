from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from tasktracker.database import make_engine
from tasktracker.main import app
from tasktracker.store import StoreError, TaskStore, get_store


class BrokenStore:
    """Store double whose every operation fails like a lost connection."""

    def _fail(self, *args, **kwargs):
        raise StoreError("connection lost")

    insert = list_all = update_completed = delete_by_id = _fail


@pytest.fixture()
def store() -> TaskStore:
    """A TaskStore over a private in-memory SQLite database."""
    engine = make_engine("sqlite://", poolclass=StaticPool)
    task_store = TaskStore(engine)
    task_store.create_tables()
    yield task_store
    engine.dispose()


@pytest.fixture()
def api(store: TaskStore) -> TestClient:
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def broken_api() -> TestClient:
    app.dependency_overrides[get_store] = lambda: BrokenStore()
    yield TestClient(app)
    app.dependency_overrides.clear()


class CrashingStore:
    """Store double that fails with an error the store layer never wraps."""

    def _crash(self, *args, **kwargs):
        raise RuntimeError("unexpected")

    insert = list_all = update_completed = delete_by_id = _crash


@pytest.fixture()
def crashing_api() -> TestClient:
    app.dependency_overrides[get_store] = lambda: CrashingStore()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()

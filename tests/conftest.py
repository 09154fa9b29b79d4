# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from taskboard.client.api import TasksApi
from taskboard.db.models import Task, TaskStatus
from taskboard.db.session import get_session
from taskboard.main import app


@pytest.fixture()
def engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session (and the
    threadpool the sync routes run on) sees the same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def _get_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_session
    # No context manager: the lifespan (logging setup, create_all on the
    # configured database) is not wanted in tests.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def add_task(session):
    def _add(title="Test Task", description="A test task", status=TaskStatus.pending,
             due_date=datetime(2024, 12, 31, 23, 59, 59, tzinfo=timezone.utc)) -> Task:
        task = Task(title=title, description=description, status=status, due_date=due_date)
        session.add(task)
        session.commit()
        session.refresh(task)
        return task

    return _add


class _ResponseAdapter:
    """Expose the bits of requests.Response that TasksApi reads."""

    def __init__(self, response) -> None:
        self._response = response
        self.status_code = response.status_code
        self.ok = response.is_success

    def json(self):
        return self._response.json()


class FakeRequestsSession:
    """
    requests.Session stand-in that routes calls into the ASGI app.

    Captures calls for assertions.
    """

    def __init__(self, client: TestClient) -> None:
        self.client = client
        self.calls: list[tuple[str, str]] = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url))
        return _ResponseAdapter(self.client.request(method, url, **kwargs))


@pytest.fixture()
def fake_http(client) -> FakeRequestsSession:
    return FakeRequestsSession(client)


@pytest.fixture()
def api(fake_http) -> TasksApi:
    return TasksApi("http://testserver/api", session=fake_http)

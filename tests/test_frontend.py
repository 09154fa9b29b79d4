# tests/test_frontend.py

from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

from taskboard.client.api import TaskApiError
from taskboard.client.hooks import TaskStore

APP = Path(__file__).resolve().parents[1] / "frontend" / "streamlit_app" / "app.py"


class ScriptedApi:
    """In-memory TasksApi whose list fetch fails once ``fail_list`` is set."""

    def __init__(self) -> None:
        self.tasks: list[dict] = []
        self.fail_list = False

    def get_tasks(self):
        if self.fail_list:
            raise TaskApiError("Failed to fetch tasks", 503)
        return {"tasks": list(self.tasks)}

    def create_task(self, title, description=None, due_date=None):
        task = {"id": len(self.tasks) + 1, "title": title, "description": description or None,
                "status": "pending", "dueDate": "2025-01-01T00:00:00Z"}
        self.tasks.append(task)
        # the re-fetch that follows this mutation is the one that fails
        self.fail_list = True
        return {"task": task}


def _app(api: ScriptedApi) -> AppTest:
    at = AppTest.from_file(str(APP), default_timeout=30)
    at.session_state["task_store"] = TaskStore(api)
    return at


def test_empty_list_message() -> None:
    at = _app(ScriptedApi()).run()

    assert not at.exception
    assert not at.error
    assert any("No tasks yet" in info.value for info in at.info)


def test_initial_fetch_failure_shows_banner() -> None:
    api = ScriptedApi()
    api.fail_list = True
    at = _app(api).run()

    assert [e.value for e in at.error] == ["Error loading tasks: Failed to fetch tasks"]


def test_fetch_failure_after_create_shows_banner() -> None:
    at = _app(ScriptedApi()).run()

    at.text_input[0].input("Write report")
    at.button[0].click()
    at.run()

    assert not at.exception
    assert any(e.value.startswith("Error loading tasks:") for e in at.error)
    assert not any("No tasks yet" in info.value for info in at.info)

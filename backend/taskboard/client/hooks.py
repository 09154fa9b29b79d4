"""Cached task list for the client; mutations invalidate it instead of patching it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import contextmanager
from typing import Any, Optional

from .api import TaskApiError, TasksApi

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self, api: TasksApi) -> None:
        self.api = api
        self._tasks: Optional[list[dict[str, Any]]] = None
        self._subscribers: list[Callable[[], None]] = []
        self.error: Optional[Exception] = None
        self.is_loading = False
        self.is_creating = False
        self.is_updating = False
        self.is_deleting = False

    # -- query ---------------------------------------------------------

    @property
    def tasks(self) -> list[dict[str, Any]]:
        if self._tasks is None:
            self.refetch()
        return self._tasks or []

    @property
    def is_stale(self) -> bool:
        return self._tasks is None

    def refetch(self) -> None:
        self.is_loading = True
        try:
            self._tasks = self.api.get_tasks()["tasks"]
            self.error = None
        except TaskApiError as e:
            # surfaced through .error, the list view decides how to render it
            logger.warning("Task list fetch failed: %s", e)
            self.error = e
        finally:
            self.is_loading = False

    def get_task(self, task_id: int) -> dict[str, Any]:
        return self.api.get_task_by_id(task_id)["task"]

    # -- invalidation --------------------------------------------------

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def invalidate(self) -> None:
        self._tasks = None
        for cb in list(self._subscribers):
            cb()

    @contextmanager
    def _in_flight(self, flag: str):
        setattr(self, flag, True)
        try:
            yield
        finally:
            setattr(self, flag, False)

    # -- mutations -----------------------------------------------------

    def create_task(self, title: str, description: Optional[str] = None, due_date=None) -> dict[str, Any]:
        with self._in_flight("is_creating"):
            task = self.api.create_task(title, description, due_date)["task"]
        self.invalidate()
        return task

    def update_task_status(self, task_id: int, status: str) -> int:
        with self._in_flight("is_updating"):
            updated = self.api.update_task_status(task_id, status)["task"]
        self.invalidate()
        return updated

    def delete_task(self, task_id: int) -> int:
        with self._in_flight("is_deleting"):
            deleted = self.api.delete_task(task_id)["task"]
        self.invalidate()
        return deleted


def use_tasks(state=None, api_url: Optional[str] = None) -> TaskStore:
    """Return the TaskStore bound to the current Streamlit session.

    ``state`` defaults to ``st.session_state``; any mutable mapping works.
    """
    if state is None:
        import streamlit as st

        state = st.session_state
    store = state.get("task_store")
    if store is None:
        store = TaskStore(TasksApi(api_url) if api_url else TasksApi())
        state["task_store"] = store
    return store

import logging
from datetime import date, datetime, timezone
from typing import Optional
import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"


class TaskApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TasksApi:
    def __init__(self, base_url: str = DEFAULT_API_URL, session=None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _send(self, method: str, path: str, failure: str, **kwargs) -> dict:
        try:
            r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TaskApiError(failure) from e
        if not r.ok:
            logger.warning("%s %s -> %s", method, path, r.status_code)
            raise TaskApiError(failure, r.status_code)
        return r.json()

    def get_tasks(self) -> dict:
        return self._send("GET", "/tasks", "Failed to fetch tasks")

    def get_task_by_id(self, task_id: int) -> dict:
        return self._send("GET", f"/tasks/{task_id}", "Failed to fetch task")

    def create_task(self, title: str, description: Optional[str] = None, due_date=None) -> dict:
        if isinstance(due_date, date):
            due_date = due_date.isoformat()
        payload = {
            "title": title,
            "description": description or None,
            "dueDate": due_date or datetime.now(timezone.utc).isoformat(),
            "status": "pending",
        }
        return self._send("POST", "/tasks", "Failed to create task", json=payload)

    def update_task_status(self, task_id: int, status: str) -> dict:
        return self._send("PUT", f"/tasks/{task_id}", "Failed to update task status", json={"status": status})

    def delete_task(self, task_id: int) -> dict:
        return self._send("DELETE", f"/tasks/{task_id}", "Failed to delete task")

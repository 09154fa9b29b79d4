# tests/test_main.py

from __future__ import annotations

import logging


def test_cors_header_on_simple_request(client) -> None:
    r = client.get("/api/tasks", headers={"Origin": "http://localhost:8501"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client) -> None:
    r = client.options(
        "/api/tasks",
        headers={
            "Origin": "http://localhost:8501",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert r.status_code == 200
    assert "POST" in r.headers["access-control-allow-methods"]


def test_requests_are_logged(client, caplog) -> None:
    caplog.set_level(logging.INFO, logger="taskboard.main")

    client.get("/api/tasks")
    client.get("/api/tasks/999")

    lines = [rec.getMessage() for rec in caplog.records if rec.name == "taskboard.main"]
    assert any(line.startswith("GET /api/tasks 200 ") and line.endswith("ms") for line in lines)
    assert any(line.startswith("GET /api/tasks/999 404 ") for line in lines)

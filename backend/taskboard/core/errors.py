import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Error: Invalid Request"
TASK_NOT_FOUND = "Task not found"


class TaskboardError(Exception):
    """Base class for errors the API turns into JSON responses."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskNotFoundError(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, task_id: int | str):
        super().__init__(TASK_NOT_FOUND)
        self.task_id = task_id


class StorageError(TaskboardError):
    """The database refused or failed a statement. Detail stays in the logs."""


# (field, pydantic error type) -> message shown to API clients
FIELD_MESSAGES = {
    ("title", "string_too_short"): "Title cannot be empty",
    ("title", "string_too_long"): "Title too long",
    ("description", "string_too_long"): "Description too long",
    ("id", "string_pattern_mismatch"): "ID must be a number",
}


def validation_issues(errors) -> list[dict]:
    # loc is ("body" | "path" | "query", field, ...); the location prefix is dropped
    issues = []
    for err in errors:
        loc = list(err.get("loc", ()))
        path = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
        code = err.get("type", "invalid")
        message = FIELD_MESSAGES.get((path[-1] if path else "", code), err.get("msg", ""))
        issues.append({"code": code, "path": path, "message": message})
    return issues


async def _on_validation_error(request: Request, exc: RequestValidationError):
    issues = validation_issues(exc.errors())
    logger.info("Rejected %s %s: %d invalid field(s)", request.method, request.url.path, len(issues))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": INVALID_REQUEST, "error": issues}),
    )


async def _on_taskboard_error(request: Request, exc: TaskboardError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(TaskboardError, _on_taskboard_error)

from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from ..db.models import TaskStatus


def _as_utc(value: datetime) -> datetime:
    # naive values (and SQLite reads) are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=200, examples=["Complete project documentation"])
    description: Optional[str] = Field(default=None, max_length=1000, examples=["Write comprehensive API docs"])
    status: TaskStatus = TaskStatus.pending
    due_date: datetime = Field(alias="dueDate", examples=["2025-12-31T23:59:59Z"])

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: datetime = Field(alias="dueDate")

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class TaskListResponse(BaseModel):
    tasks: List[TaskOut]


class TaskResponse(BaseModel):
    task: TaskOut


class TaskMutationResponse(BaseModel):
    message: str = Field(examples=["Task status updated successfully"])
    task: int = Field(examples=[1])


# Error bodies, documented on the routes
class FieldIssue(BaseModel):
    code: str = Field(examples=["string_too_short"])
    path: List[str] = Field(examples=[["title"]])
    message: str = Field(examples=["String should have at least 1 character"])


class ValidationErrorResponse(BaseModel):
    message: str = Field(examples=["Error: Invalid Request"])
    error: List[FieldIssue]


class ErrorResponse(BaseModel):
    error: str = Field(examples=["Task not found"])

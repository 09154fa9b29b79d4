from fastapi import APIRouter, Depends, Path, status
from sqlmodel import Session
from ...core.errors import TaskNotFoundError
from ...db.session import get_session
from ...schemas.tasks import (
    ErrorResponse,
    TaskCreate,
    TaskListResponse,
    TaskMutationResponse,
    TaskResponse,
    TaskStatusUpdate,
    ValidationErrorResponse,
)
from ...services import tasks as service

router = APIRouter(tags=["Tasks"])

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Validation error"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}
SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Server error"}}


# ids are BIGINT at most; anything larger cannot name a row
MAX_TASK_ID = 2**63 - 1


def task_id_param(id: str = Path(pattern=r"^\d+$", description="Task ID", examples=["1"])) -> int:
    digits = id.lstrip("0") or "0"
    if len(digits) > len(str(MAX_TASK_ID)) or int(digits) > MAX_TASK_ID:
        raise TaskNotFoundError(digits)
    return int(digits)


@router.get("/tasks", response_model=TaskListResponse, responses=SERVER_ERROR,
            summary="Get all tasks")
def list_all(session: Session = Depends(get_session)):
    return {"tasks": service.list_tasks(session)}


@router.get("/tasks/{id}", response_model=TaskResponse,
            responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
            summary="Get task by ID")
def get_one(task_id: int = Depends(task_id_param), session: Session = Depends(get_session)):
    return {"task": service.get_task(session, task_id)}


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
             responses={**BAD_REQUEST, **SERVER_ERROR},
             summary="Create a new task")
def create(body: TaskCreate, session: Session = Depends(get_session)):
    return {"task": service.create_task(session, body)}


@router.put("/tasks/{id}", response_model=TaskMutationResponse,
            responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
            summary="Update task status")
def update_status(body: TaskStatusUpdate, task_id: int = Depends(task_id_param),
                  session: Session = Depends(get_session)):
    updated = service.update_task_status(session, task_id, body.status)
    return {"message": "Task status updated successfully", "task": updated}


@router.delete("/tasks/{id}", response_model=TaskMutationResponse,
               responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
               summary="Delete a task")
def delete(task_id: int = Depends(task_id_param), session: Session = Depends(get_session)):
    deleted = service.delete_task(session, task_id)
    return {"message": "Task deleted successfully", "task": deleted}

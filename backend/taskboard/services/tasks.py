"""Task record operations: one adapter call each, behind a storage failure boundary."""

import logging
from contextlib import contextmanager
from typing import Iterator, List
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from ..core.errors import StorageError, TaskNotFoundError
from ..db import crud
from ..db.models import Task, TaskStatus
from ..schemas.tasks import TaskCreate

logger = logging.getLogger(__name__)


@contextmanager
def storage_boundary(session: Session, message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("%s", message)
        raise StorageError(message) from e


def list_tasks(session: Session) -> List[Task]:
    with storage_boundary(session, "Failed to fetch tasks"):
        return crud.select_tasks(session)


def get_task(session: Session, task_id: int) -> Task:
    with storage_boundary(session, "Failed to fetch task"):
        task = crud.select_task(session, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def create_task(session: Session, body: TaskCreate) -> Task:
    task = Task(
        title=body.title,
        description=body.description,
        status=body.status,
        due_date=body.due_date,
    )
    with storage_boundary(session, "Failed to create task"):
        created = crud.insert_task(session, task)
    logger.info("Created task %s", created.id)
    return created


def update_task_status(session: Session, task_id: int, status: TaskStatus) -> int:
    with storage_boundary(session, "Failed to update task"):
        updated = crud.update_task_status(session, task_id, status)
    if updated is None:
        raise TaskNotFoundError(task_id)
    logger.info("Task %s marked %s", task_id, status.value)
    return updated


def delete_task(session: Session, task_id: int) -> int:
    with storage_boundary(session, "Failed to delete task"):
        deleted = crud.delete_task(session, task_id)
    if deleted is None:
        raise TaskNotFoundError(task_id)
    logger.info("Deleted task %s", task_id)
    return deleted

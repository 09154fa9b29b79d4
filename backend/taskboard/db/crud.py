from typing import List, Optional
from sqlmodel import Session, select
from .models import Task, TaskStatus

def insert_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def select_tasks(session: Session) -> List[Task]:
    return list(session.exec(select(Task).order_by(Task.id)).all())

def select_task(session: Session, task_id: int) -> Optional[Task]:
    return session.get(Task, task_id)

def update_task_status(session: Session, task_id: int, status: TaskStatus) -> Optional[int]:
    task = session.get(Task, task_id)
    if task is None:
        return None
    task.status = status
    session.add(task)
    session.commit()
    return task_id

def delete_task(session: Session, task_id: int) -> Optional[int]:
    task = session.get(Task, task_id)
    if task is None:
        return None
    session.delete(task)
    session.commit()
    return task_id

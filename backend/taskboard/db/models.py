import enum
from datetime import datetime
from typing import Optional
from sqlalchemy import Column, DateTime, Enum
from sqlmodel import SQLModel, Field

class TaskStatus(str, enum.Enum):
    pending = "pending"
    completed = "completed"

class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    # ids are never handed out twice, even after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200, nullable=False)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: TaskStatus = Field(
        default=TaskStatus.pending,
        sa_column=Column(Enum(TaskStatus, name="task_status"), nullable=False, default=TaskStatus.pending),
    )
    due_date: datetime = Field(sa_column=Column("due_date", DateTime(timezone=True), nullable=False))

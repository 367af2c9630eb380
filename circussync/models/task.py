# circussync/models/task.py
from datetime import datetime

from sqlmodel import SQLModel, Field

from circussync.models.base import Record


class TaskBase(SQLModel):
    title: str = Field(default="", max_length=200)
    description: str = ""
    due_date: datetime | None = None
    completed: bool = False
    assigned_to: str | None = Field(default=None, description="User id of the assignee")


class Task(TaskBase, Record):
    """Task record as stored."""

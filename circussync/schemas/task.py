# circussync/schemas/task.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from circussync.models.task import TaskBase


class TaskCreate(TaskBase):
    model_config = ConfigDict(extra="forbid")


class TaskUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    description: str | None = None
    due_date: datetime | None = None
    completed: bool | None = None
    assigned_to: str | None = None

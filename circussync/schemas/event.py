# circussync/schemas/event.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from circussync.models.event import EventBase, EventStatus, PerformerAssignment


class EventCreate(EventBase):
    model_config = ConfigDict(extra="forbid")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v


class EventUpdate(SQLModel):
    """Partial update payload for events."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    date: datetime | None = None
    status: EventStatus | None = None
    client: str | None = None
    location: str | None = None
    notes: str | None = None
    performers: list[PerformerAssignment] | None = None

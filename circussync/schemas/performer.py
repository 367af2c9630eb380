# circussync/schemas/performer.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from circussync.models.performer import Availability, AvailabilityStatus, PerformerBase, Skill


class PerformerCreate(PerformerBase):
    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class PerformerUpdate(SQLModel):
    """Partial update payload for performers."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=200)
    email: str | None = None
    phone: str | None = None
    bio: str | None = None
    skills: list[Skill] | None = None
    availability: list[Availability] | None = None
    notes: str | None = None


class AvailabilityUpdate(SQLModel):
    """Upsert of one day's availability entry."""

    model_config = ConfigDict(extra="forbid")

    date: datetime
    status: AvailabilityStatus
    notes: str | None = None

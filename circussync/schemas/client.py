# circussync/schemas/client.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from circussync.models.client import ClientBase, ClientStatus, FollowUp


class ClientCreate(ClientBase):
    """
    Payload for creating a client.

    id / created_at / updated_at are assigned server-side and rejected here.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class ClientUpdate(SQLModel):
    """
    Partial update payload for clients.
    All fields are optional; only fields that are set get written.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=200)
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    event_types: list[str] | None = None
    services_used: list[str] | None = None
    status: ClientStatus | None = None
    last_performed: datetime | None = None
    last_contacted: datetime | None = None
    next_follow_up: FollowUp | None = None
    notes: str | None = None
    events: list[str] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v
